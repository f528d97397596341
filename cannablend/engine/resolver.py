"""
Blend resolver: joins ``BlendEntry`` ids against a strain catalog.

Only resolves identifiers.  Weight totals and blend size are checked by the
engine and the blend builder respectively.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from cannablend.engine.errors import StrainNotFoundError
from cannablend.models.prediction import BlendInput
from cannablend.models.strain import BlendEntry, Strain

log = logging.getLogger(__name__)


def resolve_blend_inputs(
    entries: Sequence[BlendEntry],
    catalog: Iterable[Strain],
) -> list[BlendInput]:
    """Pair each entry with its ``Strain``, preserving entry order.

    Args:
        entries: Blend entries referencing strains by id.
        catalog: Available strains, unique by ``strain_id``.

    Returns:
        ``BlendInput`` list in the same order as ``entries``.

    Raises:
        StrainNotFoundError: If any entry's ``strain_id`` is not in ``catalog``.
    """
    by_id = {s.strain_id: s for s in catalog}
    inputs: list[BlendInput] = []
    for entry in entries:
        strain = by_id.get(entry.strain_id)
        if strain is None:
            raise StrainNotFoundError(entry.strain_id)
        inputs.append(BlendInput(strain=strain, weight=entry.weight))
    log.debug("Resolved %d blend entr(ies) against %d strain(s).", len(inputs), len(by_id))
    return inputs
