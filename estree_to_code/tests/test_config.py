from estree_to_code.config import GeneratorConfig, OutputMode, PrinterConfig


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.printer == PrinterConfig(minify=False, indent="    ", newline="\n")
        assert config.output.mode is OutputMode.ERROR_IF_EXISTS
        assert not config.output.validate_before_write
        assert config.output.atomic_write
        assert config.add_generation_comment
        assert not config.header_in_minify

    def test_from_dict(self):
        config = GeneratorConfig.from_dict(
            {
                "printer": {"minify": True, "indent": "\t"},
                "output": {"mode": "force", "validate_before_write": True},
                "add_generation_comment": False,
                "unknown_key": 1,
            }
        )
        assert config.printer.minify
        assert config.printer.indent == "\t"
        assert config.printer.newline == "\n"
        assert config.output.mode is OutputMode.FORCE
        assert config.output.validate_before_write
        assert config.output.atomic_write
        assert not config.add_generation_comment
        assert not hasattr(config, "unknown_key")

    def test_to_dict_round_trip(self):
        config = GeneratorConfig()
        config.printer.minify = True
        config.output.mode = OutputMode.FORCE
        config.header_in_minify = True

        data = config.to_dict()

        assert data["output"]["mode"] == "force"
        assert GeneratorConfig.from_dict(data) == config
