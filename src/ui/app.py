"""Streamlit web application for product specification generation."""

import asyncio
import html
import logging
import os

import streamlit as st

from src.chains.spec_generator import SpecGeneratorChain
from src.ui.clipboard import StreamlitClipboard
from src.ui.controller import UIController
from src.ui.state import SpecField
from src.ui.utils import (
    FIELD_DIRECTIONS,
    FIELD_HEADINGS,
    GENERATING_LABEL,
    count_bullets,
    generate_label,
    visible_panels,
)

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="Product Spec Generator",
    page_icon="📋",
    layout="centered",
)

PLACEHOLDER = (
    "e.g., 'A portable Bluetooth speaker with 20-hour battery life, IPX7 waterproof "
    "rating, dual passive radiators, and USB-C charging. It supports aptX codec and "
    "can pair with another speaker for stereo sound.'"
)


def init_session_state():
    """Initialize session state variables."""
    if "clipboard" not in st.session_state:
        st.session_state.clipboard = StreamlitClipboard()
    if "controller" not in st.session_state:
        st.session_state.controller = UIController(
            generator=SpecGeneratorChain(),
            clipboard=st.session_state.clipboard,
        )
    if "product_description" not in st.session_state:
        st.session_state.product_description = ""
    if "generate_requested" not in st.session_state:
        st.session_state.generate_requested = False


def get_controller() -> UIController:
    return st.session_state.controller


def on_generate_click():
    st.session_state.generate_requested = True


def on_clear_click():
    get_controller().clear()
    st.session_state.product_description = ""


def on_copy_click(field: SpecField):
    asyncio.run(get_controller().copy(field))


def render_input_section():
    """Render description input, error banner and action buttons."""
    controller = get_controller()
    busy = controller.is_loading or st.session_state.generate_requested

    st.text_area(
        "Product Description:",
        key="product_description",
        height=200,
        placeholder=PLACEHOLDER,
        disabled=busy,
    )
    controller.set_description(st.session_state.product_description)

    if controller.error_message and not busy:
        st.error(f"**Error!** {controller.error_message}")

    col1, col2 = st.columns(2)
    with col1:
        st.button(
            "Clear Data",
            on_click=on_clear_click,
            disabled=busy,
            use_container_width=True,
        )
    with col2:
        st.button(
            generate_label(busy),
            type="primary",
            on_click=on_generate_click,
            disabled=busy,
            use_container_width=True,
        )


def run_pending_generation():
    """Run a generation requested by the last click, then redraw."""
    if not st.session_state.generate_requested:
        return

    try:
        with st.spinner(GENERATING_LABEL):
            asyncio.run(get_controller().generate())
    finally:
        st.session_state.generate_requested = False
    st.rerun()


def render_spec_panel(controller: UIController, field: SpecField, text: str):
    """Render one read-only specification panel with its copy button."""
    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown(f"**{FIELD_HEADINGS[field]}**")
    with col2:
        st.button(
            controller.copy_label(field),
            key=f"copy_{field.value}",
            on_click=on_copy_click,
            args=(field,),
            use_container_width=True,
        )

    direction = FIELD_DIRECTIONS[field]
    align = "right" if direction == "rtl" else "left"
    st.markdown(
        f'<div dir="{direction}" style="white-space: pre-wrap; text-align: {align}; '
        f'line-height: 1.6;">{html.escape(text)}</div>',
        unsafe_allow_html=True,
    )
    st.caption(f"{count_bullets(text)} bullet points")


@st.fragment(run_every=1.0)
def watch_copy_feedback():
    """Redraw the page once every copy label has reverted."""
    if not get_controller().any_copied:
        st.rerun()


def render_output_section():
    """Render generated specifications, if any."""
    controller = get_controller()
    result = controller.result
    if result is None:
        return

    st.divider()
    st.header("Generated Product Specifications:")
    for field, text in visible_panels(result):
        render_spec_panel(controller, field, text)

    st.session_state.clipboard.flush()

    # Only ticks while a "copied" label is showing
    if controller.any_copied:
        watch_copy_feedback()


def main():
    """Main application entry point."""
    init_session_state()

    st.title("📋 Product Spec Generator")
    st.caption(
        "Enter a detailed product description below, and I'll generate a comprehensive "
        "list of specifications in bullet points in both English and Arabic."
    )

    render_input_section()
    run_pending_generation()
    render_output_section()


if __name__ == "__main__":
    main()
