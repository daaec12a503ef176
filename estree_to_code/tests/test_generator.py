from pathlib import Path

import pytest

from estree_to_code import __version__
from estree_to_code.builders import js_expression_statement, js_identifier, js_program
from estree_to_code.config import GeneratorConfig
from estree_to_code.errors import ShapeViolationError
from estree_to_code.generator import SourceGenerator

TEST_DATA = Path(__file__).parent / "test_data"

PROGRAM = js_program(js_expression_statement(js_identifier("a")))


class TestSourceGenerator:
    def test_header(self):
        generator = SourceGenerator(command_line="estree_to_code in.json out.js")
        assert generator.generate(PROGRAM) == f"// Generated by estree_to_code v{__version__} : estree_to_code in.json out.js\na;\n"

    def test_no_header(self):
        config = GeneratorConfig(add_generation_comment=False)
        assert SourceGenerator(config).generate(PROGRAM) == "a;\n"

    def test_minify_drops_header(self):
        config = GeneratorConfig()
        config.printer.minify = True
        generator = SourceGenerator(config)
        assert generator.generation_comment() is None
        assert generator.generate(PROGRAM) == "a;"

    def test_header_in_minify(self):
        config = GeneratorConfig(header_in_minify=True)
        config.printer.minify = True
        assert SourceGenerator(config).generate(PROGRAM) == f"// Generated by estree_to_code v{__version__} : estree_to_code\na;"

    def test_generate_from_json(self):
        config = GeneratorConfig(add_generation_comment=False)
        source = SourceGenerator(config).generate_from_json((TEST_DATA / "program.json").read_text())
        assert source == (TEST_DATA / "program.js").read_text()

    def test_generate_from_invalid_json(self):
        with pytest.raises(ShapeViolationError):
            SourceGenerator().generate_from_json("[")
