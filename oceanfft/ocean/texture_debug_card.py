# -*- coding: utf-8 -*-

"""
Filename: texture_debug_card.py
Author: storro
Date: 2026-10-18
Description: Utility for displaying a field texture on a card in the scene for debugging purposes.
"""

from panda3d.core import CardMaker, NodePath, Shader, Texture, TransparencyAttrib

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from oceanfft.app.ocean_app import OceanApp

# u_mode 0: signed scalar in the red channel, 1: signed vector in rgb
DEBUG_TEX_VERT = """
#version 330
uniform mat4 p3d_ModelViewProjectionMatrix;
in vec4 p3d_Vertex;
in vec2 p3d_MultiTexCoord0;
out vec2 v_uv;
void main() {
    v_uv = p3d_MultiTexCoord0;
    gl_Position = p3d_ModelViewProjectionMatrix * p3d_Vertex;
}
"""

DEBUG_TEX_FRAG = """
#version 330
uniform sampler2D p3d_Texture0;
uniform float u_gain;
uniform int u_mode;
in vec2 v_uv;
out vec4 o_color;
void main() {
    vec4 texel = texture(p3d_Texture0, v_uv);
    if (u_mode == 0) {
        o_color = vec4(vec3(0.5 + 0.5 * u_gain * texel.r), 1.0);
    } else {
        o_color = vec4(0.5 + 0.5 * u_gain * texel.rgb, 1.0);
    }
}
"""


class TextureDebugCard:
    @staticmethod
    def attach(
        app: "OceanApp",
        tex: Texture,
        gain: float = 1.0,
        mode: int = 0,
        pos: tuple[float, float] = (-1.0, 0.7),
        size: tuple[float, float] = (0.5, 0.5),
        anchor: str = "top_left",
    ) -> NodePath:
        """
        Attach a card to the aspect2d layer that displays the given texture for debugging purposes
        """

        cm = CardMaker("tex_debug")
        width, height = size

        if anchor == "bottom_right":
            margin_x, margin_y = pos
            cm.set_frame(-margin_x - width, -margin_x, margin_y, margin_y + height)
            card = NodePath(cm.generate())
            card.reparent_to(app.a2dBottomRight)
        else:
            left, bottom = pos
            cm.set_frame(left, left + width, bottom, bottom + height)
            card = NodePath(cm.generate())
            card.reparent_to(app.aspect2d)

        card.set_texture(tex)

        card.set_shader(Shader.make(Shader.SL_GLSL, DEBUG_TEX_VERT, DEBUG_TEX_FRAG))
        card.set_shader_input("u_gain", float(gain))
        card.set_shader_input("u_mode", int(mode))

        card.set_bin("fixed", 100)
        card.set_depth_test(False)
        card.set_depth_write(False)
        card.set_transparency(TransparencyAttrib.M_none)

        return card
