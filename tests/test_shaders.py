import pytest

from quadgame.shaders import (
    PreprocessorConfig,
    ShaderPreprocessError,
    preprocess_shader,
)


def test_preprocessor_source_case():
    shader_string = """
#version blah blah

asd
asd

#include "hello.glsl"

qwe
"""
    preprocessed = """
#version blah blah

asd
asd

iii
jjj

qwe
"""
    result = preprocess_shader(
        shader_string,
        PreprocessorConfig(includes=[("hello.glsl", "iii\njjj")]),
    )
    assert result == preprocessed


def test_source_without_includes_is_unchanged():
    source = "void main() {}\n"
    assert preprocess_shader(source, PreprocessorConfig()) == source


def test_several_spaces_before_name():
    config = PreprocessorConfig(includes=[("a.glsl", "AAA")])
    assert preprocess_shader('x\n#include    "a.glsl"\ny', config) == "x\nAAA\ny"


def test_first_matching_include_wins():
    config = PreprocessorConfig(includes=[("a", "one"), ("a", "two")])
    assert preprocess_shader('#include "a"', config) == "one"


def test_unknown_include_raises():
    with pytest.raises(ShaderPreprocessError, match="missing.glsl"):
        preprocess_shader('#include "missing.glsl"', PreprocessorConfig())


def test_unquoted_name_raises():
    config = PreprocessorConfig(includes=[("a", "x")])
    with pytest.raises(ShaderPreprocessError):
        preprocess_shader("#include a", config)


def test_directive_at_end_raises():
    with pytest.raises(ShaderPreprocessError):
        preprocess_shader("text #include", PreprocessorConfig())


def test_unterminated_name_raises():
    config = PreprocessorConfig(includes=[("a", "x")])
    with pytest.raises(ShaderPreprocessError):
        preprocess_shader('#include "a', config)