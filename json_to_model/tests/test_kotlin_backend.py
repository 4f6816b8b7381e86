from __future__ import annotations

import pytest

from json_to_model.pipeline.analyzer import extract
from json_to_model.pipeline.backends import KotlinBackend
from json_to_model.pipeline.backends.kotlin_backend import kotlin_string
from json_to_model.pipeline.config import GenerationOptions


def render(document, options=None, root_name="Model"):
    options = options or GenerationOptions()
    model_set = extract(document, root_name, options)
    return KotlinBackend(options).emit(model_set)


def test_data_class():
    code, file_name = render({"id": 1, "name": "Ada"}, GenerationOptions(null_safety=False))

    assert code == (
        "package com.example.models\n"
        "\n"
        "data class Model(\n"
        "    val id: Int,\n"
        "    val name: String\n"
        ")\n"
    )
    assert file_name == "Model"


def test_nullable_parameters_default_to_null():
    code, _ = render({"id": 1, "ratio": 0.5, "tags": ["a"]})

    assert "    val id: Int? = null,\n" in code
    assert "    val ratio: Double? = null,\n" in code
    assert "    val tags: List<String>? = null\n)" in code


def test_package_name_option():
    code, _ = render({"id": 1}, GenerationOptions(package_name="org.acme.api"))
    assert code.startswith("package org.acme.api\n\n")


def test_kotlinx_serialization():
    document = {"user_id": 1, "profile": {"bio": "b"}}
    code, _ = render(document, GenerationOptions(null_safety=False, serialization_style="kotlinx-serialization"))

    assert code.startswith("package com.example.models\n\nimport kotlinx.serialization.SerialName\nimport kotlinx.serialization.Serializable\n\n")
    assert "@Serializable\ndata class Bio(\n    val bio: String\n)" in code
    assert '@Serializable\ndata class Model(\n    @SerialName("user_id")\n    val userId: Int,\n    val profile: Bio\n)' in code


def test_kotlinx_serialization_without_renamed_fields():
    code, _ = render({"id": 1}, GenerationOptions(serialization_style="kotlinx-serialization"))

    assert "import kotlinx.serialization.Serializable\n" in code
    assert "SerialName" not in code


@pytest.mark.parametrize(
    "style,annotation,import_path",
    [
        ("jackson", '@JsonProperty("user_id")', "import com.fasterxml.jackson.annotation.JsonProperty"),
        ("gson", '@SerializedName("user_id")', "import com.google.gson.annotations.SerializedName"),
    ],
)
def test_annotation_libraries(style, annotation, import_path):
    code, _ = render({"user_id": 1, "name": "x"}, GenerationOptions(serialization_style=style))

    assert import_path in code
    assert f"    {annotation}\n    val userId: Int? = null," in code
    assert "@Serializable" not in code


def test_no_annotation_import_without_renamed_fields():
    code, _ = render({"id": 1}, GenerationOptions(serialization_style="gson"))
    assert "import" not in code


def test_class_with_defaults_without_constructor():
    document = {"name": "a", "count": 1, "ok": True, "tags": [1], "owner": {"id": 1}, "extra": {"a": {"b": 1}}, "note": None}
    code, _ = render(document, GenerationOptions(include_constructor=False, null_safety=False))

    assert "class Model {\n" in code
    assert '    var name: String = ""\n' in code
    assert "    var count: Int = 0\n" in code
    assert "    var ok: Boolean = false\n" in code
    assert "    var tags: List<Int> = emptyList()\n" in code
    assert "    var owner: Id = Id()\n" in code
    assert "    var a: Map<String, Any?> = emptyMap()\n" in code
    assert "    var note: Any? = null\n" in code
    assert "data class" not in code


def test_empty_model_is_plain_class():
    code, _ = render({"meta": {}}, GenerationOptions(null_safety=False))

    assert "\nclass Object\n" in code
    assert "data class Model(\n    val meta: Object\n)" in code


def test_kotlin_string_escapes():
    assert kotlin_string('say "hi"') == '"say \\"hi\\""'
    assert kotlin_string("$ref") == '"\\$ref"'
