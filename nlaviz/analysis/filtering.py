"""Selection of lakes by origin and depth class."""

from collections.abc import Collection, Sequence

from nlaviz.data.views import FilteredRow, Observation


EMPTY_SELECTION_MESSAGE = "Please check at least one lake type or lake depth option"


class ValidationError(ValueError):
    """The user's selection leaves nothing to show; recoverable and meant for display."""

    def __init__(self, message: str = EMPTY_SELECTION_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def filter_observations(
    observations: Sequence[Observation],
    selected_origins: Collection[str],
    selected_depths: Collection[str],
    nitrogen: float,
) -> tuple[FilteredRow, ...]:
    """Keep lakes whose origin AND depth class are both selected and broadcast ``nitrogen`` onto them.

    Args:
        observations: Dataset rows in dataset order.
        selected_origins: Lake origin labels to keep.
        selected_depths: Depth class labels to keep.
        nitrogen: Nitrogen input attached to every retained row.

    Returns:
        Retained rows, projected to location and ecoregion, in dataset order.

    Raises:
        ValidationError: If no lake matches the selection.
    """
    origins = frozenset(selected_origins)
    depths = frozenset(selected_depths)
    rows = tuple(
        FilteredRow(
            index=i,
            longitude=obs.longitude,
            latitude=obs.latitude,
            region=obs.region,
            nitrogen=nitrogen,
        )
        for i, obs in enumerate(observations)
        if obs.origin in origins and obs.depth_class in depths
    )
    if not rows:
        raise ValidationError()
    return rows
