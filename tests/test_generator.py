import logging

import pytest

from pinmodel.codegen import generate_property
from pinmodel.codegen.core.config import ConfigError, GeneratorConfig
from pinmodel.codegen.core.generator import (
    CodeGenerator,
    GenerationResult,
    SchemaAuthoringError,
    generate_code,
)
from pinmodel.codegen.core.resolver import DictSchemaResolver
from pinmodel.codegen.core.schema import (
    ArrayProperty,
    BooleanProperty,
    EnumValue,
    IntegerProperty,
    ReferenceProperty,
    SchemaDefinition,
    StringProperty,
)
from pinmodel.codegen.languages.objc import (
    ObjCGenerator,
    create_objc_generator,
    create_strict_generator,
)
from pinmodel.logging_config import get_logger, setup_logging


@pytest.fixture()
def generator(resolver):
    return ObjCGenerator(resolver=resolver)


def test_generator_metadata(generator):
    assert generator.language_name == "objc"
    assert generator.file_extensions == (".h", ".m")
    assert isinstance(generator.config, GeneratorConfig)


def test_dict_config_is_merged_with_defaults(resolver):
    generator = ObjCGenerator({"class_prefix": "PX"}, resolver)

    assert generator.config.class_prefix == "PX"
    assert generator.config.dictionary_variable == "modelDictionary"
    assert generator.property_for(ReferenceProperty("creator", ref="user")).objc_type_name() == "PXUser"


def test_render_fragments_for_enum(generator, board_type_property):
    fragments = generator.render_fragments(board_type_property, "Pin")

    assert list(fragments) == [
        "enum_declaration",
        "enum_utility_interface",
        "interface_declaration",
        "implementation_declaration",
        "encode",
        "decode",
        "assignment",
        "merge",
    ]
    assert fragments["interface_declaration"] == "@property (nonatomic, assign, readonly) PinBoardType boardType;"
    assert fragments["merge"] == [
        'builder.boardType = PinBoardTypeFromString(valueOrNil(modelDictionary, @"board_type"));'
    ]


def test_render_fragments_without_enum(generator, boards_property):
    fragments = generator.render_fragments(boards_property, "Pin")

    assert "enum_declaration" not in fragments
    assert fragments["assignment"][-1] == "_boards = result;"


def test_generate_code_success(generator, boards_property):
    result = generate_code(generator, boards_property, "Pin")

    assert result.success
    assert result.warnings == []
    assert result.metadata["language"] == "objc"
    assert result.metadata["references"] == ["board"]
    assert result.metadata["value_kind"] == "array"
    assert "_boards = result;" in result.code.split("\n")


def test_generate_code_reports_unresolved_references(generator):
    result = generate_code(generator, ReferenceProperty("owner", ref="ghost"), "Pin")

    assert result.success
    assert result.warnings == ["Property 'owner' references unknown schema 'ghost'"]
    assert result.fragments["interface_declaration"] == ""
    assert result.fragments["assignment"] == []


def test_generate_code_turns_generator_errors_into_failed_result(generator, caplog):
    result = generate_code(generator, ArrayProperty("counts", items=IntegerProperty("count")), "Pin")

    assert not result.success
    assert isinstance(result.exception, SchemaAuthoringError)
    assert "Arrays cannot contain primitive types" in result.error_message
    assert result.code == ""
    assert "Code generation failed" in caplog.text


def test_generate_code_strict_references(resolver):
    generator = create_strict_generator(resolver)

    result = generate_code(generator, ReferenceProperty("owner", ref="ghost"), "Pin")

    assert not result.success
    assert "ghost" in result.error_message


def test_reserved_accessor_names_warn(generator):
    warnings = generator.validate_property(StringProperty("description"))

    assert len(warnings) == 1
    assert "description" in warnings[0]


def test_error_result():
    result = GenerationResult.error("boom")

    assert not result.success
    assert result.error_message == "boom"
    assert result.fragments == {}


def test_factory_functions(resolver):
    generator = create_objc_generator({"filter_null_entries_on_merge": True}, resolver)

    assert generator.config.filter_null_entries_on_merge is True
    assert generator.config.class_prefix == "PI"
    assert create_strict_generator().config.strict_references is True


def test_generate_property_end_to_end():
    resolver = DictSchemaResolver.from_schemas([SchemaDefinition(name="board")])
    descriptor = StringProperty(
        "privacy", enum_values=(EnumValue("public", "public"), EnumValue("secret", "secret"))
    )

    result = generate_property(descriptor, "Board", config={"class_prefix": "PI"}, resolver=resolver)

    assert result.success
    assert result.fragments["enum_declaration"].startswith("typedef NS_ENUM(NSInteger, BoardPrivacyType) {")
    assert result.fragments["decode"] == '[aDecoder decodeIntegerForKey:@"privacy"]'


def test_generate_property_with_config_file(tmp_path):
    path = tmp_path / "pinmodel.json"
    path.write_text('{"class_prefix": "PB"}')
    resolver = DictSchemaResolver.from_schemas([SchemaDefinition(name="board")])

    result = generate_property(ReferenceProperty("board", ref="board"), "Pin", config=path, resolver=resolver)

    assert result.fragments["interface_declaration"] == (
        "@property (nullable, nonatomic, strong, readonly) PBBoard *board;"
    )


def test_generator_accepts_config_file_path(tmp_path, resolver):
    path = tmp_path / "pinmodel.json"
    path.write_text('{"class_prefix": "PB", "indent": "  "}')

    generator = ObjCGenerator(str(path), resolver)

    assert generator.config.class_prefix == "PB"
    assert generator.config.indent == "  "


def test_generator_rejects_unknown_config_type(resolver):
    with pytest.raises(ConfigError, match="Invalid config type"):
        ObjCGenerator(42, resolver)


def test_nested_containers_needing_conversion_fail_generation(generator):
    descriptor = ArrayProperty(
        "board_groups", items=ArrayProperty("group", items=ReferenceProperty("board", ref="board"))
    )

    result = generate_code(generator, descriptor, "Pin")

    assert not result.success
    assert isinstance(result.exception, SchemaAuthoringError)
    assert "board_groups" in result.error_message


def test_validate_properties_reports_enum_type_collisions(generator):
    descriptors = [
        StringProperty("content", enum_values=(EnumValue("text", "text"),)),
        IntegerProperty("content_type", enum_values=(EnumValue("image", 1),)),
        StringProperty("privacy", enum_values=(EnumValue("public", "public"),)),
        StringProperty("title"),
    ]

    warnings = generator.validate_properties(descriptors, "Pin")

    assert warnings == ["Properties 'content', 'content_type' all declare enum type 'PinContentType'"]


def test_validate_properties_includes_per_property_warnings(generator):
    descriptors = [StringProperty("description"), ReferenceProperty("owner", ref="ghost")]

    warnings = generator.validate_properties(descriptors, "Pin")

    assert len(warnings) == 2
    assert "NSObject" in warnings[0]
    assert "ghost" in warnings[1]


def test_unresolved_reference_warns_once_per_property(generator, caplog):
    with caplog.at_level(logging.WARNING, logger="pinmodel"):
        generator.render_fragments(ArrayProperty("owners", items=ReferenceProperty("owner", ref="ghost")), "Pin")

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Pin.owners" in warnings[0].getMessage()


def test_code_generator_is_abstract():
    with pytest.raises(TypeError):
        CodeGenerator()


def test_fragments_are_deterministic(generator):
    descriptor = BooleanProperty("is_repin")

    assert generator.render_fragments(descriptor, "Pin") == generator.render_fragments(descriptor, "Pin")


def test_setup_logging(tmp_path):
    log_file = tmp_path / "logs" / "pinmodel.log"
    package_logger = logging.getLogger("pinmodel")

    try:
        setup_logging("DEBUG", log_file=log_file, rich_output=False)
        get_logger("pinmodel.tests").debug("hello from tests")

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 2
        for handler in package_logger.handlers:
            handler.flush()
        assert "hello from tests" in log_file.read_text()

        setup_logging("WARNING")
        assert len(package_logger.handlers) == 1
    finally:
        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(logging.NOTSET)
