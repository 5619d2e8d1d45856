# -*- coding: utf-8 -*-

"""
Filename: debug_cards.py
Author: storro
Date: 2026-10-18
Description: Debug card visualization + hotkeys.
"""

from direct.gui.OnscreenText import OnscreenText
from panda3d.core import TextNode

from oceanfft.ocean.ocean_textures import OceanFieldTextures
from oceanfft.ocean.texture_debug_card import TextureDebugCard

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from oceanfft.app.ocean_app import OceanApp


class DebugCardController:
    def __init__(self, app: "OceanApp", textures: OceanFieldTextures) -> None:
        self._app = app

        # (texture, gain, shader mode, label)
        self._views = [
            (textures.height_map.texture, 0.25, 0, "Height"),
            (textures.displacement_map.texture, 0.25, 1, "Displacement (dx, height, dz)"),
            (textures.normal_map.texture, 1.0, 1, "Normal map"),
        ]
        self._debug_mode = 0
        self._debug_visible = True

        debug_margin_x, debug_margin_y = (0.03, 0.06)
        debug_width, debug_height = (0.8, 0.8)
        debug_label_offset = 0.02

        tex, gain, mode, label = self._views[0]
        self._debug_card = TextureDebugCard.attach(
            self._app,
            tex,
            gain=gain,
            mode=mode,
            pos=(debug_margin_x, debug_margin_y),
            size=(debug_width, debug_height),
            anchor="bottom_right",
        )

        self._debug_label = OnscreenText(
            text=label,
            parent=self._app.a2dBottomRight,
            pos=(-debug_margin_x - debug_width, debug_margin_y + debug_height + debug_label_offset),
            align=TextNode.A_left,
            scale=0.05,
            fg=(1, 1, 1, 1),
            shadow=(0, 0, 0, 1),
            mayChange=True,
        )

        self._app.accept("d", self.cycle)
        self._app.accept("c", self.toggle)

        OnscreenText(
            text="c: show/hide debug card\nd: cycle debug view\nescape: quit",
            parent=self._app.a2dTopLeft,
            pos=(0.03, -0.06),
            align=TextNode.A_left,
            scale=0.05,
            fg=(1, 1, 1, 1),
            shadow=(0, 0, 0, 1),
            mayChange=False,
        )

    def toggle(self) -> None:
        self._debug_visible = not self._debug_visible
        if self._debug_visible:
            self._debug_card.show()
            self._debug_label.show()
        else:
            self._debug_card.hide()
            self._debug_label.hide()

    def cycle(self) -> None:
        if not self._debug_visible:
            return

        self._debug_mode = (self._debug_mode + 1) % len(self._views)
        tex, gain, mode, label = self._views[self._debug_mode]
        self._debug_card.set_texture(tex, 1)
        self._debug_card.set_shader_input("u_gain", gain)
        self._debug_card.set_shader_input("u_mode", mode)
        self._debug_label.setText(label)
