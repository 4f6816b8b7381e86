from __future__ import annotations

from json_to_model.pipeline.analyzer import extract
from json_to_model.pipeline.backends import TypeScriptBackend
from json_to_model.pipeline.config import GenerationOptions


def render(document, options=None, root_name="Model"):
    options = options or GenerationOptions()
    model_set = extract(document, root_name, options)
    return TypeScriptBackend(options).emit(model_set)


def test_class_with_constructor():
    code, file_name = render({"id": 1, "name": "Ada", "active": True}, GenerationOptions(null_safety=False))

    assert code == (
        "export class Model {\n"
        "  id: number;\n"
        "  name: string;\n"
        "  active: boolean;\n"
        "\n"
        "  constructor(id: number, name: string, active: boolean) {\n"
        "    this.id = id;\n"
        "    this.name = name;\n"
        "    this.active = active;\n"
        "  }\n"
        "}\n"
    )
    assert file_name == "Model"


def test_null_safety_marks_fields_optional():
    code, _ = render({"id": 1, "tags": ["a"]})

    assert "  id?: number;" in code
    assert "  tags?: string[];" in code
    assert "constructor(id?: number, tags?: string[])" in code


def test_optional_parameters_only_at_the_end():
    code, _ = render({"a": None, "b": 1, "c": None}, GenerationOptions(null_safety=False))
    assert "constructor(a: any | undefined, b: number, c?: any)" in code


def test_nested_models_are_rendered_first():
    code, _ = render({"user": {"id": 1}, "total": 2.5}, GenerationOptions(null_safety=False), "Response")

    assert code.index("export class Id {") < code.index("export class Response {")
    assert "  user: Id;" in code
    assert "  total: number;" in code


def test_objects_without_model_use_record():
    code, _ = render({"a": {"b": {"c": 1}}}, GenerationOptions(null_safety=False))
    assert "  b: Record<string, any>;" in code
    assert "class C" not in code


def test_defaults_without_constructor():
    document = {"name": "a", "count": 1, "ok": False, "tags": ["x"], "owner": {"id": 1}, "note": None}
    code, _ = render(document, GenerationOptions(include_constructor=False, null_safety=False))

    assert '  name: string = "";' in code
    assert "  count: number = 0;" in code
    assert "  ok: boolean = false;" in code
    assert "  tags: string[] = [];" in code
    assert "  owner: Id = new Id();" in code
    assert "  note?: any;" in code
    assert "constructor" not in code


def test_type_only_emits_interfaces():
    code, _ = render({"id": 1, "child": {"name": "x"}}, GenerationOptions(serialization_style="type-only"))

    assert "export interface Name {" in code
    assert "export interface Model {" in code
    assert "  child?: Name;" in code
    assert "constructor" not in code
    assert "class" not in code


def test_class_transformer_decorators():
    document = {"user_name": "x", "profile": {"bio": "b"}, "posts": [{"title": "t"}]}
    code, _ = render(document, GenerationOptions(null_safety=False, serialization_style="class-transformer"))

    assert code.startswith('import { Expose, Type } from "class-transformer";\n\n')
    assert '  @Expose({ name: "user_name" })\n  userName: string;' in code
    assert "  @Type(() => Bio)\n  profile: Bio;" in code
    assert "  @Type(() => Title)\n  posts: Title[];" in code


def test_class_transformer_imports_only_used_decorators():
    code, _ = render({"id": 1, "name": "x"}, GenerationOptions(serialization_style="class-transformer"))
    assert "import" not in code
    assert "@" not in code

    code, _ = render({"first_name": "x"}, GenerationOptions(serialization_style="class-transformer"))
    assert 'import { Expose } from "class-transformer";' in code


def test_file_name_is_not_doubled():
    _, file_name = render({"id": 1}, root_name="User")
    assert file_name == "UserModel"

    _, file_name = render({"id": 1}, root_name="UserModel")
    assert file_name == "UserModel"
