"""Streamlit page: nitrogen slider, lake type/depth checkboxes and the predicted bloom map.

Run with ``streamlit run dashboard/app.py``.
"""

import logging

import streamlit as st

from nlaviz.analysis import load_or_fit_bloom_model
from nlaviz.app import BloomMapController, SelectionState
from nlaviz.data import NLADataset
from nlaviz.data.state_boundaries import load_state_boundaries
from nlaviz.utils import DEFAULT_DASHBOARD_CFG as CFG


logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title=CFG.page_title,
    layout="wide",
)


@st.cache_resource
def load_dataset() -> NLADataset:
    return NLADataset.from_csv(depth_threshold=CFG.depth_threshold)


@st.cache_resource
def load_model(_dataset: NLADataset):
    return load_or_fit_bloom_model(_dataset, kind=CFG.model_kind)


@st.cache_resource
def load_states():
    try:
        return load_state_boundaries()
    except Exception:
        # Map still renders without outlines when offline
        logger.exception("Could not read state boundaries")
        return None


def get_controller() -> BloomMapController:
    """One controller per browser session, sharing the process-wide dataset and model."""
    if "controller" not in st.session_state:
        dataset = load_dataset()
        st.session_state.controller = BloomMapController(
            dataset,
            load_model(dataset),
            states=load_states(),
            dashboard_cfg=CFG,
        )
    return st.session_state.controller


def checkbox_group(label: str, choices: tuple[str, ...], key: str) -> list[str]:
    st.markdown(f"**{label}**")
    return [choice for choice in choices if st.checkbox(choice, value=True, key=f"{key}_{choice}")]


try:
    controller = get_controller()
except (FileNotFoundError, ValueError) as exc:
    st.error(f"Could not load the lake data: {exc}")
    st.stop()

st.title(CFG.page_title)

left, right = st.columns(2)
left.image(CFG.nitrogen_image_url)
right.image(CFG.dilution_image_url)

st.write(CFG.intro_text)

with st.sidebar:
    nitrogen = st.slider(
        CFG.nitrogen_label,
        min_value=CFG.nitrogen_min,
        max_value=CFG.nitrogen_max,
        value=CFG.nitrogen_default,
        step=CFG.nitrogen_step,
    )
    origins = checkbox_group(CFG.origin_label, controller.origin_choices, "lake_origin")
    depths = checkbox_group(CFG.depth_label, controller.depth_choices, "lake_depth")

outcome = controller.select(SelectionState(origins=origins, depths=depths, nitrogen=nitrogen))
if outcome.figure is not None:
    st.pyplot(outcome.figure, transparent=True)
elif outcome.status == "invalid":
    st.warning(outcome.message)
else:
    st.error(outcome.message)

st.write(CFG.question_text)
