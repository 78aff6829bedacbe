"""GLSL sources, uniform values and geometry for the grading render pass."""

from __future__ import annotations

import re

import numpy as np

from .render_params import RenderParams

DISPLAY_FUNCTION_PLACEHOLDER = "OCIOFUNC"

UNIFORM_NAMES = (
    "inputTexture",
    "baseColor",
    "blackPoint",
    "whitePoint",
    "G_blackpoint",
    "G_whitepoint",
    "G_lift",
    "G_gain",
    "G_mult",
    "G_offset",
    "G_gamma",
    "G_temp",
    "G_tint",
    "bypass",
    "gradeBypass",
)

VERTEX_SOURCE = """#version 330 core

layout (location = 0) in vec3 position;
layout (location = 1) in vec2 uv;

out vec2 texCoord;

void main()
{
    texCoord = uv;
    gl_Position = vec4(position, 1.0);
}
"""

_FRAGMENT_TEMPLATE = """
in vec2 texCoord;

uniform sampler2D inputTexture;
uniform vec4 baseColor;
uniform vec4 blackPoint;
uniform vec4 whitePoint;
uniform vec4 G_blackpoint;
uniform vec4 G_whitepoint;
uniform vec4 G_lift;
uniform vec4 G_gain;
uniform vec4 G_mult;
uniform vec4 G_offset;
uniform vec4 G_gamma;
uniform float G_temp;
uniform float G_tint;
uniform int bypass;
uniform int gradeBypass;

out vec4 fragColor;
out vec4 fragColorSm;

const float LIN_BREAKPOINT = 0.006801176276;
const float LOG_BREAKPOINT = 0.16129032258064516;
const float LOG_SLOPE = 10.367739199729071;
const float LOG_INTERCEPT = 0.09077750069969258;

vec4 logToLinear(vec4 v)
{
    vec3 onLine = (v.rgb - LOG_INTERCEPT) / LOG_SLOPE;
    vec3 curve = exp2(v.rgb * 20.46 - 10.5);
    return vec4(mix(curve, onLine, lessThanEqual(v.rgb, vec3(LOG_BREAKPOINT))), v.a);
}

vec4 linearToLog(vec4 v)
{
    vec3 onLine = LOG_SLOPE * v.rgb + LOG_INTERCEPT;
    vec3 curve = (log2(v.rgb) + 10.5) / 20.46;
    return vec4(mix(curve, onLine, lessThanEqual(v.rgb, vec3(LIN_BREAKPOINT))), v.a);
}

vec4 balance(vec4 p, vec4 positive, vec4 negative, float amount)
{
    return amount >= 0.0
        ? p * positive * amount + (1.0 - amount) * p
        : p * negative * -amount + (1.0 + amount) * p;
}

vec4 grade(vec4 pixIn)
{
    vec4 inverted = baseColor / max(pixIn, vec4(0.0001)) * 0.1;
    inverted.a = 1.0;
    inverted = (inverted - blackPoint) / (whitePoint - blackPoint);

    vec4 graded = balance(inverted, vec4(0.0, 1.0, 2.0, 1.0), vec4(2.0, 1.0, 0.0, 1.0), -G_temp);
    graded = balance(graded, vec4(1.5, 0.0, 1.5, 1.0), vec4(0.0, 1.5, 0.0, 1.0), 0.75 * G_tint);
    graded = (graded - G_blackpoint) / (G_whitepoint - G_blackpoint);

    graded = linearToLog(graded);
    vec4 slope = G_mult * (G_gain - G_lift);
    vec4 powBase = max(slope * graded + G_offset + G_lift, vec4(0.0001));
    graded = clamp(pow(powBase, 1.0 / G_gamma), 0.0, 100.0);
    graded = logToLinear(graded);

    if (bypass == 1) return pixIn;
    if (gradeBypass == 1) return inverted;
    return graded;
}

void main()
{
    vec4 pixel = grade(texture(inputTexture, texCoord));
    pixel.a = 1.0;
    fragColor = OCIOFUNC(pixel);
    fragColorSm = fragColor;
}
"""

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def fragment_source(function_name: str) -> str:
    """Return the grading fragment shader calling ``function_name`` for display."""
    if not _IDENTIFIER.fullmatch(function_name or ""):
        raise ValueError(f"not a valid shader function name: {function_name!r}")
    if DISPLAY_FUNCTION_PLACEHOLDER not in _FRAGMENT_TEMPLATE:
        raise RuntimeError("fragment shader template is corrupted")
    return _FRAGMENT_TEMPLATE.replace(DISPLAY_FUNCTION_PLACEHOLDER, function_name, 1)


def uniform_values(params: RenderParams) -> dict[str, object]:
    """Map every shader uniform name to the value taken from ``params``."""
    return {
        "inputTexture": 0,
        "baseColor": tuple(params.base_color),
        "blackPoint": tuple(params.black_point),
        "whitePoint": tuple(params.white_point),
        "G_blackpoint": tuple(params.g_blackpoint),
        "G_whitepoint": tuple(params.g_whitepoint),
        "G_lift": tuple(params.g_lift),
        "G_gain": tuple(params.g_gain),
        "G_mult": tuple(params.g_mult),
        "G_offset": tuple(params.g_offset),
        "G_gamma": tuple(params.g_gamma),
        "G_temp": float(params.temp),
        "G_tint": float(params.tint),
        "bypass": int(params.bypass),
        "gradeBypass": int(params.grade_bypass),
    }


def proxy_size(width: int, height: int, scale: float) -> tuple[int, int]:
    """Size of the proxy texture for an image scaled by ``scale``."""
    if width < 0 or height < 0:
        raise ValueError(f"image size must not be negative, got {width}x{height}")
    if scale < 0:
        raise ValueError(f"scale must not be negative, got {scale}")
    factor = np.float32(scale)
    return int(np.float32(width) * factor), int(np.float32(height) * factor)


def quad_geometry() -> tuple[np.ndarray, np.ndarray]:
    """Full-screen quad: (4, 5) positions with texture coordinates, and 6 indices."""
    vertices = np.array(
        [
            [-1.0, -1.0, 0.0, 0.0, 0.0],
            [1.0, -1.0, 0.0, 1.0, 0.0],
            [1.0, 1.0, 0.0, 1.0, 1.0],
            [-1.0, 1.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float32,
    )
    indices = np.array([0, 1, 2, 2, 3, 0], dtype=np.uint32)
    return vertices, indices