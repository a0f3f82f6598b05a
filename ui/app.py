"""Streamlit presenter UI - calls backend API"""
import streamlit as st
import requests
import time
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

import config
from core.utils.formatting import format_time
from core.utils.logger import setup_logger, get_logger
from ui.api_client import ChronoSlideClient

# Setup logging
log_file = Path(config.LOG_DIR) / "ui.log"
setup_logger("root", str(log_file))
logger = get_logger(__name__)

client = ChronoSlideClient()

st.set_page_config(page_title="ChronoSlide", page_icon="⏱️", layout="wide")

# Session state
if 'slides' not in st.session_state:
    st.session_state.slides = None
if 'total_minutes' not in st.session_state:
    st.session_state.total_minutes = config.DEFAULT_TOTAL_TIME_MINUTES
if 'running' not in st.session_state:
    st.session_state.running = False
if 'auto_advance' not in st.session_state:
    st.session_state.auto_advance = False
if 'timeline' not in st.session_state:
    st.session_state.timeline = None


def slide_payload(slides):
    return [
        {"id": s["id"], "title": s["title"], "durationSeconds": s["durationSeconds"]}
        for s in slides
    ]


def apply_schedule(response):
    st.session_state.slides = response["slides"]


DRIFT_MESSAGES = {
    "on_time": "You are on time",
    "behind": "You are behind",
    "ahead": "You are ahead",
}


def render_setup():
    st.title("⏱️ ChronoSlide")

    if st.session_state.slides is None:
        try:
            apply_schedule(client.default_schedule(config.DEFAULT_SLIDE_COUNT, st.session_state.total_minutes))
        except requests.RequestException as e:
            logger.error(f"Failed to load default schedule: {e}")
            st.error(f"API unavailable: {e}")
            return

    slides = st.session_state.slides
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Timing")
        total_minutes = st.number_input("Total time (min)", min_value=1, value=int(st.session_state.total_minutes))
        st.session_state.total_minutes = total_minutes

        count = st.number_input("Slides", min_value=1, value=len(slides), step=1)
        if count != len(slides):
            apply_schedule(client.resize(slide_payload(slides), int(count), total_minutes))
            st.rerun()

        if st.button("Distribute time evenly", use_container_width=True):
            apply_schedule(client.distribute(slide_payload(slides), total_minutes))
            st.rerun()

    with col2:
        st.subheader("AI plan")
        topic = st.text_area("Topic", placeholder="Ex: Q4 marketing strategy...", height=100)
        if st.button("Generate a smart plan", disabled=not topic, use_container_width=True):
            with st.spinner("Generating..."):
                try:
                    result = client.generate_plan(topic, len(slides), total_minutes, slide_payload(slides))
                except requests.RequestException as e:
                    logger.error(f"Plan request failed: {e}")
                    result = None
            if result and result["generated"]:
                apply_schedule(result)
                st.rerun()
            else:
                st.warning("No plan produced, schedule unchanged")

    st.divider()
    total_seconds = sum(s["durationSeconds"] for s in slides)
    st.subheader(f"Slides ({total_seconds / 60:.1f} min planned)")

    for slide in slides:
        c1, c2, c3, c4 = st.columns([1, 6, 2, 1])
        c1.markdown(f"**{slide['number']}**")
        title = c2.text_input("Title", value=slide["title"], key=f"title_{slide['id']}", label_visibility="collapsed")
        duration = c3.number_input(
            "Seconds", min_value=0.0, value=float(slide["durationSeconds"]), step=1.0,
            key=f"dur_{slide['id']}", label_visibility="collapsed"
        )
        if c4.button("🗑️", key=f"del_{slide['id']}", disabled=len(slides) == 1):
            apply_schedule(client.remove_slide(slide_payload(slides), slide["id"]))
            st.rerun()
        if (title and title != slide["title"]) or duration != slide["durationSeconds"]:
            apply_schedule(client.update_slide(
                slide_payload(slides), slide["id"],
                title=title or None, duration_seconds=duration
            ))
            st.rerun()

    if st.button("+ Add slide"):
        apply_schedule(client.add_slide(slide_payload(slides), total_minutes))
        st.rerun()

    st.session_state.auto_advance = st.toggle("Auto-advance slides", value=st.session_state.auto_advance)

    if st.button("▶ Start presentation", type="primary", use_container_width=True):
        try:
            client.start(slide_payload(slides), st.session_state.auto_advance)
            st.session_state.running = True
            st.session_state.timeline = client.running_schedule()["segments"]
            st.rerun()
        except requests.HTTPError as e:
            st.error(f"Cannot start: {e.response.json().get('detail', e)}")


def render_timeline(snap):
    """One cell per slide, sized by its share of the plan"""
    segments = st.session_state.get("timeline")
    if not segments or not snap["progress_defined"]:
        return
    cells = st.columns([max(s["width_percent"], 1) for s in segments], gap="small")
    for index, cell in enumerate(cells):
        if index == snap["current_slide_index"]:
            marker = "🟦"
        elif index == snap["ideal_slide_index"]:
            marker = "🟨"
        elif segments[index]["end_percent"] <= snap["progress_percent"]:
            marker = "⬛"
        else:
            marker = "⬜"
        cell.markdown(f"{marker} {index + 1}")


def render_running():
    try:
        snap = client.snapshot()
    except requests.RequestException as e:
        st.error(f"Lost connection to the API: {e}")
        return

    if snap["mode"] == "setup":
        st.session_state.running = False
        st.rerun()

    slide = snap["current_slide"]
    overrun = snap["is_overrun"]

    st.progress(snap["progress_percent"] / 100, text=f"Slide {slide['number']} / {snap['slide_count']}")
    render_timeline(snap)

    col1, col2, col3 = st.columns([2, 3, 2])
    with col1:
        st.caption("Ideal slide" if snap["advance_mode"] == "auto" else "Now showing")
        st.header(slide["title"])

    with col2:
        st.metric("Overrun" if overrun else "Slide time left", snap["slide_remaining_text"])
        st.progress(snap["slide_progress_percent"] / 100)

        drift = snap["drift"]
        if snap["advance_mode"] == "auto":
            st.info("Auto mode: slides follow the planned timing.")
        elif drift:
            message = DRIFT_MESSAGES[drift["state"]]
            if drift["state"] != "on_time":
                message += f" (should be on slide {drift['ideal_number']})"
            if drift["magnitude_text"]:
                message += f" {drift['magnitude_text']}"
            (st.success if drift["state"] == "on_time" else st.warning)(message)

    with col3:
        st.metric("Total time left", snap["global_remaining_text"])
        st.caption(f"Elapsed {format_time(snap['elapsed_global_time'])}")
        if snap["estimated_finish"]:
            st.caption(f"Estimated finish {snap['estimated_finish']}")
        if not snap["progress_defined"]:
            st.caption("Schedule has no planned time")

    manual = snap["advance_mode"] == "manual"
    b1, b2, b3, b4 = st.columns(4)
    if b1.button("■ Stop", use_container_width=True):
        client.stop()
        st.session_state.running = False
        st.rerun()
    if b2.button("◀", disabled=not manual or snap["current_slide_index"] == 0, use_container_width=True):
        client.change_slide(-1)
        st.rerun()
    paused = snap["mode"] == "paused"
    if b3.button("▶ Resume" if paused else "⏸ Pause", use_container_width=True):
        client.toggle_pause()
        st.rerun()
    if b4.button("▶", disabled=not manual or snap["current_slide_index"] == snap["slide_count"] - 1,
                 use_container_width=True):
        client.change_slide(1)
        st.rerun()

    if not paused:
        time.sleep(config.TICK_INTERVAL_SECONDS)
        st.rerun()


if st.session_state.running:
    render_running()
else:
    render_setup()
