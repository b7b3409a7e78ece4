"""Remove special and auto-generated units from ordered sequences."""

from __future__ import annotations

import logging
import typing as typ

from ._constants import LOGIN_PAGE_SHORTCODE, LOGIN_PAGE_SLUG

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import OrderedSequence, Unit

logger = logging.getLogger(__name__)


def is_login_page(unit: Unit) -> bool:
    """Return True for the page a login plugin generates for itself."""
    return unit.slug == LOGIN_PAGE_SLUG and unit.content.strip() == LOGIN_PAGE_SHORTCODE


class ExclusionFilter:
    """Drop configured special units and detected non-content units."""

    def __init__(
        self,
        excluded_ids: typ.Collection[str] = (),
        *,
        units: typ.Mapping[str, Unit] | None = None,
        detect_login_page: bool = True,
    ) -> None:
        """Configure the filter.

        Parameters
        ----------
        excluded_ids : Collection[str], optional
            Unit ids removed from every view.
        units : Mapping[str, Unit], optional
            Unit lookup used to inspect units that sit behind menu proxies.
        detect_login_page : bool, optional
            Whether auto-generated login pages are removed.
        """
        self.excluded_ids = frozenset(excluded_ids)
        self.units = units or {}
        self.detect_login_page = detect_login_page

    def is_excluded(self, unit_id: str) -> bool:
        if unit_id in self.excluded_ids:
            return True
        if not self.detect_login_page:
            return False
        unit = self.units.get(unit_id)
        return unit is not None and is_login_page(unit)

    def apply(self, sequence: OrderedSequence) -> OrderedSequence:
        """Return a renumbered copy of ``sequence`` without excluded units."""
        kept = [entry.node for entry in sequence if not self.is_excluded(entry.unit_id)]
        dropped = len(sequence) - len(kept)
        if dropped:
            logger.debug(
                "Excluded %d of %d %s entries", dropped, len(sequence), sequence.mode.value
            )
        return sequence.with_nodes(kept)


__all__ = ["ExclusionFilter", "is_login_page"]
