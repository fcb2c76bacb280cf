import pytest

from pinmodel.codegen.core.templates import (
    BUILTIN_TEMPLATES,
    TemplateError,
    create_template_engine,
    get_default_template_engine,
)


def test_builtin_templates_registered():
    engine = create_template_engine()

    for name in BUILTIN_TEMPLATES:
        assert engine.template_exists(name)
    assert not engine.template_exists("struct.go.j2")


def test_default_engine_is_shared():
    assert get_default_template_engine() is get_default_template_engine()


def test_render_lines_splits_output():
    engine = create_template_engine()

    lines = engine.render_lines(
        "enum_utility_interface.h.j2", {"type_name": "PinPrivacyType"}
    )

    assert lines == [
        "extern PinPrivacyType PinPrivacyTypeFromString(NSString * _Nonnull str);",
        "extern NSString * _Nonnull PinPrivacyTypeToString(PinPrivacyType enumType);",
    ]


def test_generated_code_is_not_escaped():
    engine = create_template_engine()
    engine.add_template("declaration.m.j2", "{{ type }} *{{ name }};")

    rendered = engine.render_template("declaration.m.j2", {"type": "NSArray <PIBoard *>", "name": "boards"})

    assert rendered == "NSArray <PIBoard *> *boards;"


def test_reference_merge_keeps_three_space_indent():
    engine = create_template_engine()

    lines = engine.render_lines(
        "reference_merge.m.j2",
        {"target": "builder.creator", "construct": "[[PIUser alloc] initWithDictionary:value]"},
    )

    assert lines[1] == "   builder.creator = [builder.creator mergeWithDictionary:value];"
    assert lines[3] == "   builder.creator = [[PIUser alloc] initWithDictionary:value];"


def test_missing_template_raises():
    engine = create_template_engine()

    with pytest.raises(TemplateError):
        engine.render_template("missing.m.j2", {})


def test_template_directory(tmp_path):
    (tmp_path / "custom.m.j2").write_text("// {{ name }}")
    engine = create_template_engine(tmp_path)

    assert engine.render_template("custom.m.j2", {"name": "Pin"}) == "// Pin"
