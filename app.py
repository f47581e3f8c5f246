# app.py
import logging

import pandas as pd
import streamlit as st

from config import configure_logging, settings
from file_utils import SUPPORTED_EXTENSIONS, resolve_job_description
from report_generator import report_to_dataframe, report_to_json
from session import InterviewSession

configure_logging()
logger = logging.getLogger(__name__)

# ---------- Streamlit Page Config ----------
st.set_page_config(
    page_title=settings.APP_TITLE,
    layout="wide",
    page_icon="📝",
)


# ---------- Session State Initialization ----------
if "stage" not in st.session_state:
    # stages: job_description -> answers -> report
    st.session_state.stage = "job_description"

if "session" not in st.session_state:
    st.session_state.session = InterviewSession()


# ---------- Reset helper ----------
def clear_answer_boxes():
    # widget keys would otherwise carry old answers into a new question set
    for k in list(st.session_state.keys()):
        if str(k).startswith("answer_box_"):
            del st.session_state[k]


def reset_everything():
    clear_answer_boxes()
    if "jd_text_input" in st.session_state:
        del st.session_state["jd_text_input"]
    st.session_state.jd_source = None
    st.session_state.stage = "job_description"
    st.session_state.session = InterviewSession()


# ---------- Sidebar ----------
st.sidebar.title("📋 Practice Controls")

stage_to_step = {"job_description": 1, "answers": 2, "report": 3}
current_step = stage_to_step.get(st.session_state.stage, 1)

st.sidebar.markdown("#### Flow Progress")
st.sidebar.progress(current_step / 3.0)
st.sidebar.markdown(
    f"""
- **1. Job description** {'✅' if current_step > 1 else '⬤'}
- **2. Your answers** {'✅' if current_step > 2 else '⬤'}
- **3. Report** {'✅' if current_step >= 3 else '⬤'}
"""
)

if st.sidebar.button("🔁 Start over"):
    reset_everything()
    st.rerun()

st.sidebar.markdown("### ℹ️ How answers are scored")
st.sidebar.caption(
    "- Keyword overlap with the JD (40)\n"
    "- Few filler words (20)\n"
    "- STAR structure (30)\n"
    "- 8–25 words per sentence (10)"
)


# ---------- Global styling ----------
st.markdown(
    """
    <style>
    .block-container {
        padding-top: 1.5rem;
        padding-bottom: 2rem;
        max-width: 1100px;
    }
    .glass-card {
        background: rgba(15, 23, 42, 0.82);
        border-radius: 18px;
        padding: 1.25rem 1.5rem;
        border: 1px solid rgba(148, 163, 184, 0.35);
        color: #e5e7eb;
    }
    .section-label {
        font-size: 0.8rem;
        letter-spacing: 0.08em;
        text-transform: uppercase;
        color: #cbd5f5;
        font-weight: 600;
        margin-bottom: 0.25rem;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


# ======================================================================
#                           STAGE 1: JOB DESCRIPTION
# ======================================================================
def render_job_description():
    st.markdown(
        f"""
        <div class="glass-card">
            <div class="section-label">{settings.APP_TITLE}</div>
            <h1 style="margin-bottom:0.3rem;">Practise answers against a real JD.</h1>
            <p style="max-width:680px; margin-top:0.35rem; font-size:0.95rem;">
                Paste a job description, answer the generated questions, and get a quick
                heuristic report: keyword coverage, filler words, STAR structure and pacing.
            </p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    st.markdown("")
    st.markdown('<div class="section-label">Step 1</div>', unsafe_allow_html=True)
    st.subheader("Job description")

    source = st.radio(
        "Where should the job description come from?",
        ["Paste text", "Upload file"],
        horizontal=True,
        key="jd_source_choice",
    )
    use_upload = source == "Upload file"

    jd_file = None
    jd_text = ""
    if use_upload:
        jd_file = st.file_uploader(
            "Upload the job description",
            type=[ext.lstrip(".") for ext in SUPPORTED_EXTENSIONS],
            key="jd_file",
        )
    else:
        jd_text = st.text_area(
            "Paste the job description",
            value=st.session_state.session.jd_text,
            height=240,
            placeholder="Paste the full job description you want to practise for...",
            key="jd_text_input",
        )

    if st.button("▶ Generate questions"):
        resolved, source_label = resolve_job_description(
            use_upload,
            jd_text,
            jd_file.name if jd_file is not None else None,
            jd_file.getvalue() if jd_file is not None else None,
        )
        if not resolved:
            if use_upload:
                st.error(
                    "We could not read text from that file. "
                    "Please upload a text-based PDF or a .txt file, or paste the JD instead."
                )
            else:
                st.error("Please paste a job description before continuing.")
            return

        session = InterviewSession.start(resolved)
        logger.info(
            "Generated %d question(s) from %d keyword(s) using %s",
            len(session.questions), len(session.keywords), source_label,
        )
        clear_answer_boxes()
        st.session_state.jd_source = source_label
        st.session_state.session = session
        st.session_state.stage = "answers"
        st.rerun()


# ======================================================================
#                           STAGE 2: ANSWERS
# ======================================================================
def render_answers():
    session: InterviewSession = st.session_state.session

    st.markdown('<div class="section-label">Step 2</div>', unsafe_allow_html=True)
    st.subheader("Answer the questions")

    if st.session_state.get("jd_source"):
        st.info(f"Questions were generated from the {st.session_state.jd_source}.")

    if session.keywords:
        with st.expander(f"Keywords picked from the JD ({len(session.keywords)})"):
            st.write(", ".join(session.keywords))
    else:
        st.info("No keywords were found in the JD, so only general questions were generated.")

    answers = {}
    for i, question in enumerate(session.questions):
        st.markdown(f"**Q{i + 1}. {question}**")
        answers[i] = st.text_area(
            f"Your answer to question {i + 1}",
            value=session.answer_for(i),
            height=140,
            key=f"answer_box_{i}",
            label_visibility="collapsed",
        )

    col_back, col_run = st.columns([1, 3])
    with col_back:
        if st.button("⬅ Edit JD"):
            st.session_state.stage = "job_description"
            st.rerun()
    with col_run:
        if st.button("Analyze answers"):
            for i, text in answers.items():
                session = session.with_answer(i, text)
            session = session.analyze()
            st.session_state.session = session
            st.session_state.stage = "report"
            st.rerun()


# ======================================================================
#                           STAGE 3: REPORT
# ======================================================================
def render_report():
    session: InterviewSession = st.session_state.session
    report = session.report

    st.markdown('<div class="section-label">Step 3</div>', unsafe_allow_html=True)
    st.subheader("Your report")

    if report is None or not report.items:
        st.info("There is nothing to report yet. Answer the questions and run the analysis.")
        if st.button("⬅ Back to answers"):
            st.session_state.stage = "answers"
            st.rerun()
        return

    col_a, col_b, col_c = st.columns(3)
    with col_a:
        st.metric("Overall score", f"{report.overall_score} / 100")
    with col_b:
        st.metric("JD keywords covered", f"{report.keyword_hits} / {len(report.keywords)}")
    with col_c:
        st.metric("Questions answered", f"{session.answered_count} / {len(session.questions)}")

    df = report_to_dataframe(report)
    st.write("### Score per question")
    st.bar_chart(pd.DataFrame({"Score": df["Score"].values}, index=df["Question #"]))

    for item in report.items:
        a = item.analysis
        with st.expander(f"Q{item.index + 1} · {a.score} pts · {item.question}"):
            if item.answer.strip():
                st.write(item.answer)
            else:
                st.caption("No answer given.")
            m1, m2, m3, m4 = st.columns(4)
            m1.metric("Keyword overlap", f"{a.kw_overlap:.0%}")
            m2.metric("Filler words", a.filler_count)
            m3.metric("Words / sentence", f"{a.avg_words_per_sentence:.1f}")
            m4.metric("Tone", a.sentiment.capitalize())
            st.markdown(
                "**STAR:** "
                + "  ".join(
                    f"{'✅' if hit else '⬜'} {label}"
                    for label, hit in (
                        ("Situation", a.star.situation),
                        ("Task", a.star.task),
                        ("Action", a.star.action),
                        ("Result", a.star.result),
                    )
                )
            )

    st.write("### Raw data")
    st.dataframe(df, hide_index=True)

    col_csv, col_json = st.columns(2)
    with col_csv:
        st.download_button(
            "⬇ Download CSV",
            data=df.to_csv(index=False),
            file_name="interview_report.csv",
            mime="text/csv",
        )
    with col_json:
        st.download_button(
            "⬇ Download JSON",
            data=report_to_json(report),
            file_name="interview_report.json",
            mime="application/json",
        )

    st.markdown("---")
    col_edit, col_new = st.columns([1, 3])
    with col_edit:
        if st.button("✏ Revise answers"):
            st.session_state.stage = "answers"
            st.rerun()
    with col_new:
        if st.button("🔁 Practise with a new JD"):
            reset_everything()
            st.rerun()


# ======================================================================
#                           MAIN ROUTER
# ======================================================================
stage = st.session_state.stage

if stage == "job_description":
    render_job_description()
elif stage == "answers":
    render_answers()
elif stage == "report":
    render_report()
else:
    st.error("Unknown stage. Resetting...")
    reset_everything()
    st.rerun()
