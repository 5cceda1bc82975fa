"""Dashboard copy, widget bounds and external assets."""

from dataclasses import dataclass
from typing import Literal


INTRO_TEXT = (
    "Now you try to input nitrogen. Larger circles are larger cyanobacterial blooms. "
    "What happens to bloom size as you change the input of nitrogen? "
    "Are lakes in some areas affected more or less than others? "
    "You can also pick the depth and type of lake to look at. "
    "(Nitrogen on a log scale. Data source: US EPA 2009, National Lakes Assessment (2007))."
)

QUESTION_TEXT = (
    "The map is color coded for different regions of the U.S. "
    "These regions represent lakes with different water quality states, "
    "surrounding land use and nutrient levels."
)

NITROGEN_GIF_URL = "https://raw.githubusercontent.com/Monsauce/Vizualizing-Nutrients/master/Nitrogen.gif"
DILUTION_PNG_URL = "https://raw.githubusercontent.com/Monsauce/Vizualizing-Nutrients/master/Dilutions.png"


@dataclass(frozen=True)
class DashboardConfig:
    """Static configuration of the Streamlit page."""

    page_title: str = "Visualizing Nutrients: Nitrogen and Cyanobacterial Blooms"
    nitrogen_label: str = "Choose your nitrogen input (ug/L)"
    nitrogen_min: int = 10
    nitrogen_max: int = 5000
    nitrogen_step: int = 100
    nitrogen_default: int = 2500
    origin_label: str = "Choose a lake type"
    depth_label: str = "Choose a lake depth"
    intro_text: str = INTRO_TEXT
    question_text: str = QUESTION_TEXT
    nitrogen_image_url: str = NITROGEN_GIF_URL
    dilution_image_url: str = DILUTION_PNG_URL
    error_text: str = "Something went wrong while drawing the map. Please adjust the inputs and try again."
    model_kind: Literal["mixed", "ols"] = "mixed"
    depth_threshold: float = 4.0


DEFAULT_DASHBOARD_CFG = DashboardConfig()


__all__ = ["DEFAULT_DASHBOARD_CFG", "DashboardConfig"]
