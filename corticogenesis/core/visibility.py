# corticogenesis/core/visibility.py
from __future__ import annotations
from typing import Any, Tuple

from corticogenesis.core.catalog import LayerKind, StageId, stage_id

# Stage from which each layer stays on screen.
_APPEARS_AT = {
    LayerKind.PIA_MATER: StageId.INITIAL,
    LayerKind.PREPLATE: StageId.PREPLATE_FORMED,
    LayerKind.MARGINAL_ZONE: StageId.PLATE_SPLITTING,
    LayerKind.CORTICAL_PLATE: StageId.PLATE_SPLITTING,
    LayerKind.SUBPLATE: StageId.PLATE_SPLITTING,
    LayerKind.LAYER_VI: StageId.LAYER_VI_FORMATION,
    LayerKind.LAYER_V: StageId.LAYER_V_FORMATION,
    LayerKind.LAYER_IV: StageId.LAYER_IV_FORMATION,
    LayerKind.LAYER_III: StageId.LAYER_III_FORMATION,
    LayerKind.LAYER_II: StageId.LAYER_II_FORMATION,
}


def first_visible_stage(layer: LayerKind) -> StageId:
    return _APPEARS_AT[layer]


def is_visible(stage: Any, layer: LayerKind) -> bool:
    """
    True if `layer` is drawn at `stage` (a Stage, StageId or int index).
    The preplate only exists at its own stage; splitting absorbs it.
    """
    current = stage_id(stage)
    if layer is LayerKind.PREPLATE:
        return current == StageId.PREPLATE_FORMED
    return current >= _APPEARS_AT[layer]


def visible_layers(stage: Any) -> Tuple[LayerKind, ...]:
    return tuple(k for k in LayerKind if is_visible(stage, k))
