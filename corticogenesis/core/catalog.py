# corticogenesis/core/catalog.py
"""
Fixed catalogs of cortical layers and developmental stages.

Both catalogs are plain read-only lookup tables keyed by enum; the widgets only
ever read from them.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Tuple


class LayerKind(Enum):
    PIA_MATER = "pia_mater"
    PREPLATE = "preplate"
    MARGINAL_ZONE = "marginal_zone"
    SUBPLATE = "subplate"
    CORTICAL_PLATE = "cortical_plate"
    LAYER_VI = "layer_vi"
    LAYER_V = "layer_v"
    LAYER_IV = "layer_iv"
    LAYER_III = "layer_iii"
    LAYER_II = "layer_ii"


@dataclass(frozen=True)
class LayerDescriptor:
    name: str
    color: str          # "#rrggbb"
    opacity: float      # 0..1, applied when painting
    description: str

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        h = self.color.lstrip("#")
        r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
        return r, g, b, int(round(255 * self.opacity))


GRAY = "#8e8e93"
YELLOW = "#ffcc00"
BLUE = "#007aff"
ORANGE = "#ff9500"
PURPLE = "#af52de"

# Outer structures sit at low opacity; cortical layers get more opaque the deeper they are.
_LAYERS = {
    LayerKind.PIA_MATER: LayerDescriptor("Pia Mater", GRAY, 0.3, "Outermost membrane"),
    LayerKind.PREPLATE: LayerDescriptor("Preplate", YELLOW, 0.6, "First structure, contains pioneer neurons"),
    LayerKind.MARGINAL_ZONE: LayerDescriptor(
        "Marginal Zone (future Layer I)", BLUE, 0.5, "Top layer, contains Cajal-Retzius cells"
    ),
    LayerKind.SUBPLATE: LayerDescriptor("Subplate (transient)", ORANGE, 0.6, "Establishes early connections"),
    LayerKind.CORTICAL_PLATE: LayerDescriptor("Cortical Plate", PURPLE, 0.2, "Forms layers II-VI"),
    LayerKind.LAYER_VI: LayerDescriptor("Layer VI", PURPLE, 0.9, "First cortical layer to form"),
    LayerKind.LAYER_V: LayerDescriptor("Layer V", PURPLE, 0.8, "Second cortical layer to form"),
    LayerKind.LAYER_IV: LayerDescriptor("Layer IV", PURPLE, 0.7, "Third cortical layer to form"),
    LayerKind.LAYER_III: LayerDescriptor("Layer III", PURPLE, 0.6, "Fourth cortical layer to form"),
    LayerKind.LAYER_II: LayerDescriptor("Layer II", PURPLE, 0.5, "Final cortical layer to form"),
}
LAYERS: Mapping[LayerKind, LayerDescriptor] = MappingProxyType(_LAYERS)

# Cortical layers in order of formation (inside-out: deepest first)
CORTICAL_LAYERS: Tuple[LayerKind, ...] = (
    LayerKind.LAYER_VI,
    LayerKind.LAYER_V,
    LayerKind.LAYER_IV,
    LayerKind.LAYER_III,
    LayerKind.LAYER_II,
)


def layers() -> Tuple[LayerDescriptor, ...]:
    """All layer descriptors in LayerKind order."""
    return tuple(LAYERS[k] for k in LayerKind)


def layer(kind: LayerKind) -> LayerDescriptor:
    return LAYERS[kind]


class StageId(IntEnum):
    INITIAL = 0
    PREPLATE_FORMED = 1
    PLATE_SPLITTING = 2
    LAYER_VI_FORMATION = 3
    LAYER_V_FORMATION = 4
    LAYER_IV_FORMATION = 5
    LAYER_III_FORMATION = 6
    LAYER_II_FORMATION = 7
    FINAL_STRUCTURE = 8


FIRST_STAGE = int(StageId.INITIAL)
LAST_STAGE = int(StageId.FINAL_STRUCTURE)
STAGE_COUNT = len(StageId)


@dataclass(frozen=True, order=True)
class Stage:
    index: int
    title: str
    description: str

    @property
    def id(self) -> StageId:
        return StageId(self.index)


_STAGES = {
    StageId.INITIAL: Stage(
        0,
        "Stage 1: Initial State",
        "The process begins with progenitor cells in the ventricular zone (bottom, not shown) below the Pia Mater.",
    ),
    StageId.PREPLATE_FORMED: Stage(
        1,
        "Stage 2: Preplate Formation",
        "The first-born 'pioneer' neurons migrate to form the Preplate, the earliest cortical structure.",
    ),
    StageId.PLATE_SPLITTING: Stage(
        2,
        "Stage 3: Cortical Plate Emergence",
        "A new wave of migrating neurons arrives, splitting the Preplate into the Marginal Zone (top) "
        "and the Subplate (bottom). The Cortical Plate forms between them.",
    ),
    StageId.LAYER_VI_FORMATION: Stage(
        3,
        "Stage 4: Inside-Out Layering (Layer VI)",
        "The 'inside-out' rule begins. Neurons migrate into the Cortical Plate to form Layer VI, the deepest layer.",
    ),
    StageId.LAYER_V_FORMATION: Stage(
        4,
        "Stage 5: Inside-Out Layering (Layer V)",
        "New neurons migrate past Layer VI to form the more superficial Layer V.",
    ),
    StageId.LAYER_IV_FORMATION: Stage(
        5,
        "Stage 6: Inside-Out Layering (Layer IV)",
        "The process continues as neurons migrate past existing layers to establish Layer IV.",
    ),
    StageId.LAYER_III_FORMATION: Stage(
        6,
        "Stage 7: Inside-Out Layering (Layer III)",
        "Layer III is formed by another wave of migrating neurons.",
    ),
    StageId.LAYER_II_FORMATION: Stage(
        7,
        "Stage 8: Inside-Out Layering (Layer II)",
        "The final wave of neurons forms Layer II, completing the main cortical layers.",
    ),
    StageId.FINAL_STRUCTURE: Stage(
        8,
        "Stage 9: Final Six-Layered Structure",
        "The mature cortex is established. Layer I (from the Marginal Zone) is on top, followed by "
        "Layers II-VI. The Subplate is a transient layer that will eventually disappear.",
    ),
}
STAGES: Mapping[StageId, Stage] = MappingProxyType(_STAGES)


def stages() -> Tuple[Stage, ...]:
    """All stages ordered by index."""
    return tuple(STAGES[s] for s in StageId)


def stage_id(value: Any) -> StageId:
    """
    Coerce an arbitrary value to a StageId.
    Anything that is not an in-range integer index resolves to INITIAL.
    """
    if isinstance(value, Stage):
        value = value.index
    if isinstance(value, bool) or not isinstance(value, int):
        return StageId.INITIAL
    try:
        return StageId(value)
    except ValueError:
        return StageId.INITIAL


def stage(value: Any) -> Stage:
    return STAGES[stage_id(value)]
