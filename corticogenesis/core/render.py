# corticogenesis/core/render.py
"""
Pure mapping from PlaybackState to a widget-free view tree.

The Qt widgets in corticogenesis.ui only translate a StageFrame into paint calls,
so everything a user can see for a given state is decided here.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from app_config import APP_HEADER
from corticogenesis.core.catalog import (
    CORTICAL_LAYERS, FIRST_STAGE, LAST_STAGE, LayerDescriptor, LayerKind, layer,
)
from corticogenesis.core.playback import PlaybackState
from corticogenesis.core.visibility import is_visible


@dataclass(frozen=True)
class Band:
    kind: LayerKind
    layer: LayerDescriptor
    children: Tuple["Band", ...] = ()

    @property
    def is_container(self) -> bool:
        return self.kind is LayerKind.CORTICAL_PLATE


@dataclass(frozen=True)
class SliderState:
    value: int
    minimum: int = FIRST_STAGE
    maximum: int = LAST_STAGE


@dataclass(frozen=True)
class TransportState:
    can_jump_start: bool
    can_step_back: bool
    can_step_forward: bool
    can_jump_end: bool
    is_playing: bool
    can_play_pause: bool = True

    @property
    def play_icon(self) -> str:
        return "pause" if self.is_playing else "play"


@dataclass(frozen=True)
class StageFrame:
    header: str
    title: str
    description: str
    bands: Tuple[Band, ...]     # top to bottom
    slider: SliderState
    transport: TransportState

    def visible_kinds(self) -> Tuple[LayerKind, ...]:
        out = []
        for b in self.bands:
            out.append(b.kind)
            out.extend(c.kind for c in b.children)
        return tuple(out)


def _band(kind: LayerKind, children: Tuple[Band, ...] = ()) -> Band:
    return Band(kind, layer(kind), children)


def layer_bands(stage_index: int) -> Tuple[Band, ...]:
    bands = [_band(LayerKind.PIA_MATER)]
    if is_visible(stage_index, LayerKind.MARGINAL_ZONE):
        bands.append(_band(LayerKind.MARGINAL_ZONE))
    if is_visible(stage_index, LayerKind.CORTICAL_PLATE):
        # Most recently formed layer on top, deepest (first formed) at the bottom
        inner = tuple(
            _band(k) for k in reversed(CORTICAL_LAYERS) if is_visible(stage_index, k)
        )
        bands.append(_band(LayerKind.CORTICAL_PLATE, inner))
    if is_visible(stage_index, LayerKind.PREPLATE):
        bands.append(_band(LayerKind.PREPLATE))
    if is_visible(stage_index, LayerKind.SUBPLATE):
        bands.append(_band(LayerKind.SUBPLATE))
    return tuple(bands)


def render(state: PlaybackState) -> StageFrame:
    st = state.stage
    idx = st.index
    return StageFrame(
        header=APP_HEADER,
        title=st.title,
        description=st.description,
        bands=layer_bands(idx),
        slider=SliderState(idx),
        transport=TransportState(
            can_jump_start=idx > FIRST_STAGE,
            can_step_back=idx > FIRST_STAGE,
            can_step_forward=idx < LAST_STAGE,
            can_jump_end=idx < LAST_STAGE,
            is_playing=state.is_playing,
        ),
    )
