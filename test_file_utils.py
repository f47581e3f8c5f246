import unittest

from file_utils import read_job_description, resolve_job_description


def make_text_pdf(text: str) -> bytes:
    """Smallest single-page PDF with a Helvetica text layer."""
    content = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(content)).encode() + b" >>\nstream\n"
        + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_at}\n%%EOF\n"
    ).encode()
    return bytes(out)


class TestReadJobDescription(unittest.TestCase):
    def test_txt(self):
        self.assertEqual(
            read_job_description("jd.txt", b"  Backend engineer, Python.\n"),
            "Backend engineer, Python.",
        )

    def test_txt_with_invalid_utf8(self):
        text = read_job_description("JD.TXT", b"caf\xe9 role")
        self.assertIsNotNone(text)
        self.assertTrue(text.endswith(" role"))

    def test_pdf_with_text_layer(self):
        pdf = make_text_pdf("Senior Backend Engineer Kafka Python")
        text = read_job_description("jd.pdf", pdf)
        self.assertIsNotNone(text)
        self.assertIn("Backend Engineer", text)
        self.assertIn("Kafka", text)

    def test_empty_file(self):
        self.assertIsNone(read_job_description("jd.txt", b""))
        self.assertIsNone(read_job_description("jd.txt", b"   \n"))

    def test_unsupported_extension(self):
        with self.assertLogs("file_utils", level="WARNING"):
            self.assertIsNone(read_job_description("jd.docx", b"PK\x03\x04"))

    def test_broken_pdf(self):
        with self.assertLogs("file_utils", level="WARNING"):
            self.assertIsNone(read_job_description("jd.pdf", b"this is not a pdf"))


class TestResolveJobDescription(unittest.TestCase):
    def test_pasted_text(self):
        self.assertEqual(
            resolve_job_description(False, "  Data engineer  ", "jd.txt", b"ignored"),
            ("Data engineer", "pasted text"),
        )

    def test_upload_wins_only_when_chosen(self):
        text, label = resolve_job_description(True, "typed but unused", "jd.txt", b"Platform engineer")
        self.assertEqual(text, "Platform engineer")
        self.assertEqual(label, "uploaded file 'jd.txt'")

    def test_upload_chosen_without_file(self):
        self.assertEqual(
            resolve_job_description(True, "typed text", None, None),
            (None, "uploaded file"),
        )

    def test_blank_paste(self):
        self.assertEqual(resolve_job_description(False, "   "), (None, "pasted text"))


if __name__ == "__main__":
    unittest.main()
