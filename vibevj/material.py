"""Surface materials and their GPU uniform block."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any

from vibevj.errors import SerializationError
from vibevj.types import Color

__all__ = ["ShaderType", "Material", "MaterialUniform"]


class ShaderType(Enum):
    """Shading model used to draw a material."""

    UNLIT = "Unlit"
    BASIC_LIT = "BasicLit"
    PBR = "PBR"
    CUSTOM = "Custom"


def _color_to_dict(color: Color) -> dict[str, float]:
    return {"r": color.r, "g": color.g, "b": color.b, "a": color.a}


def _color_from_dict(data: Any) -> Color:
    try:
        return Color(
            float(data["r"]), float(data["g"]), float(data["b"]), float(data["a"])
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"invalid color: {data!r}") from exc


@dataclass
class Material:
    """Base colour, PBR factors, emission and shading model."""

    color: Color = Color.WHITE
    metallic: float = 0.0
    roughness: float = 0.5
    emissive: Color = Color.BLACK
    shader_type: ShaderType = ShaderType.BASIC_LIT

    @classmethod
    def unlit(cls, color: Color) -> Material:
        """Return an unlit material of a single colour."""
        return cls(
            color=color,
            metallic=0.0,
            roughness=1.0,
            emissive=Color.BLACK,
            shader_type=ShaderType.UNLIT,
        )

    @classmethod
    def emissive_material(cls, color: Color, intensity: float) -> Material:
        """Return an unlit material that only emits ``color`` scaled by ``intensity``."""
        return cls(
            color=Color.BLACK,
            metallic=0.0,
            roughness=1.0,
            emissive=Color(
                color.r * intensity,
                color.g * intensity,
                color.b * intensity,
                color.a,
            ),
            shader_type=ShaderType.UNLIT,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": _color_to_dict(self.color),
            "metallic": self.metallic,
            "roughness": self.roughness,
            "emissive": _color_to_dict(self.emissive),
            "shader_type": self.shader_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Material:
        try:
            color = _color_from_dict(data["color"])
            emissive = _color_from_dict(data["emissive"])
            metallic = float(data["metallic"])
            roughness = float(data["roughness"])
            shader_type = ShaderType(data["shader_type"])
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"invalid material: {exc}") from exc
        return cls(
            color=color,
            metallic=metallic,
            roughness=roughness,
            emissive=emissive,
            shader_type=shader_type,
        )


_UNIFORM_LAYOUT = struct.Struct("<4f4f2f2f")


@dataclass(frozen=True)
class MaterialUniform:
    """Material data as laid out in a GPU uniform buffer."""

    color: tuple[float, float, float, float]
    emissive: tuple[float, float, float, float]
    metallic: float
    roughness: float

    @classmethod
    def from_material(cls, material: Material) -> MaterialUniform:
        return cls(
            color=material.color.to_array(),
            emissive=material.emissive.to_array(),
            metallic=material.metallic,
            roughness=material.roughness,
        )

    def to_bytes(self) -> bytes:
        """Return the little-endian f32 block, padded to 16-byte alignment."""
        return _UNIFORM_LAYOUT.pack(
            *self.color, *self.emissive, self.metallic, self.roughness, 0.0, 0.0
        )