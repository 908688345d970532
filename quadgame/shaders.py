"""Shader source preprocessing: expansion of ``#include "name"`` directives."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["ShaderPreprocessError", "PreprocessorConfig", "preprocess_shader"]

_DIRECTIVE = "#include"


class ShaderPreprocessError(ValueError):
    """Raised when a shader source holds a malformed or unknown include."""


@dataclass
class PreprocessorConfig:
    """Named include files available to ``#include`` directives."""

    includes: list[tuple[str, str]] = field(default_factory=list)

    def _lookup(self, filename: str) -> str:
        for name, content in self.includes:
            if name == filename:
                return content
        raise ShaderPreprocessError(
            f'Include file {filename} in not on "includes" list'
        )


def preprocess_shader(source: str, config: PreprocessorConfig) -> str:
    """Replace every ``#include "name"`` directive with the named content."""
    text = source
    position = 0
    while True:
        start = text.find(_DIRECTIVE, position)
        if start < 0:
            return text
        index = start + len(_DIRECTIVE)
        while index < len(text) and text[index] == " ":
            index += 1
        if index >= len(text) or text[index] != '"':
            raise ShaderPreprocessError(
                f"expected a quoted file name after {_DIRECTIVE} at offset {start}"
            )
        name_start = index + 1
        name_end = text.find('"', name_start)
        if name_end < 0:
            raise ShaderPreprocessError(
                f"unterminated file name after {_DIRECTIVE} at offset {start}"
            )
        content = config._lookup(text[name_start:name_end])
        text = text[:start] + content + text[name_end + 1 :]
        position = name_end