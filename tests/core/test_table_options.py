import pytest
from pytest_mock.plugin import MockerFixture

from mariaddl.core import table_options
from mariaddl.core.constants import DEFAULT_ENGINE_KEYWORDS, TABLE_OPTION_TOKENS
from mariaddl.core.table_options import (
    DEFAULT_TABLE_OPTIONS_CONFIG,
    TableOptionsConfig,
    TableOptionsRenderer,
    render_table_options,
)
from mariaddl.utils.errors import ConfigError, UnknownKeywordError


def test_render_table_options_empty():
    assert render_table_options({}) == ""
    assert render_table_options(None) == ""
    assert render_table_options() == ""


def test_render_table_options_charset_collation_engine():
    assert (
        render_table_options(
            {"ENGINE": "InnoDB", "characterSet": "utf8", "collation": "utf8_general_ci"}
        )
        == " CHARSET=utf8,\n\tCOLLATE=utf8_general_ci,\n\tENGINE = InnoDB"
    )


def test_render_table_options_default_charset_skips_charset_and_collation():
    assert (
        render_table_options(
            {
                "ENGINE": "InnoDB",
                "defaultCharSet": True,
                "characterSet": "utf8",
                "collation": "utf8_general_ci",
            }
        )
        == " ENGINE = InnoDB"
    )


def test_render_table_options_comment_is_escaped():
    assert (
        render_table_options({"description": "customer's\n\"main\" table"})
        == " COMMENT = 'customer\\'s\\n\\\"main\\\" table'"
    )


def test_render_table_options_fixed_leading_order():
    options = {
        "KEY_BLOCK_SIZE": 8,
        "description": "note",
        "ENGINE": "Aria",
        "collation": "latin1_swedish_ci",
        "characterSet": "latin1",
        "TRANSACTIONAL": True,
        "ROW_FORMAT": "page",
    }
    assert render_table_options(options) == (
        " CHARSET=latin1,\n\t"
        "COLLATE=latin1_swedish_ci,\n\t"
        "ENGINE = Aria,\n\t"
        "COMMENT = 'note',\n\t"
        "KEY_BLOCK_SIZE = 8,\n\t"
        "ROW_FORMAT = PAGE,\n\t"
        "TRANSACTIONAL = YES"
    )


def test_render_table_options_follows_engine_order():
    options = {
        "ENGINE": "InnoDB",
        "WITH_SYSTEM_VERSIONING": True,
        "STATS_PERSISTENT": "default",
        "AUTO_INCREMENT": 100,
        "DATA_DIRECTORY": "/data",
    }
    assert render_table_options(options) == (
        " ENGINE = InnoDB,\n\t"
        "AUTO_INCREMENT = 100,\n\t"
        "DATA DIRECTORY = '/data',\n\t"
        "STATS_PERSISTENT = DEFAULT,\n\t"
        "WITH SYSTEM VERSIONING"
    )


def test_render_table_options_filters_by_engine():
    # MEMORY doesn't accept ROW_FORMAT or DATA_DIRECTORY.
    options = {
        "ENGINE": "MEMORY",
        "ROW_FORMAT": "fixed",
        "DATA_DIRECTORY": "/data",
        "MAX_ROWS": "1000",
    }
    assert render_table_options(options) == " ENGINE = MEMORY,\n\tMAX_ROWS = 1000"


def test_render_table_options_unknown_engine_uses_defaults(debug_logs):
    options = {
        "ENGINE": "Mystery",
        "AUTO_INCREMENT": 5,
        "PACK_KEYS": "1",
        "KEY_BLOCK_SIZE": 4,
        "WITH_SYSTEM_VERSIONING": True,
    }
    assert render_table_options(options) == (
        " ENGINE = Mystery,\n\tKEY_BLOCK_SIZE = 4,\n\tPACK_KEYS = 1,\n\tWITH SYSTEM VERSIONING"
    )
    assert "Engine 'Mystery' isn't recognized" in debug_logs.text

    assert render_table_options({"AUTO_INCREMENT": 5, "PACK_KEYS": 0}) == " PACK_KEYS = 0"


def test_render_table_options_system_versioning():
    assert render_table_options({"WITH_SYSTEM_VERSIONING": False}) == ""
    assert render_table_options({"WITH_SYSTEM_VERSIONING": "yes"}) == " WITH SYSTEM VERSIONING"


def test_render_table_options_merge_engine():
    options = {"ENGINE": "MERGE", "INSERT_METHOD": "last", "UNION": "(`t1`, `t2`)"}
    assert render_table_options(options) == (
        " ENGINE = MERGE,\n\tINSERT_METHOD = LAST,\n\tUNION = (`t1`, `t2`)"
    )


@pytest.mark.parametrize(
    "options",
    [
        {"ENGINE": "InnoDB", "DELAY_KEY_WRITE": 1, "IETF_QUOTES": "yes", "INSERT_METHOD": "first"},
        {"ENGINE": "CSV", "ROW_FORMAT": "dynamic", "PAGE_CHECKSUM": 1, "IETF_QUOTES": "yes"},
        {"ENGINE": "Nope", "ROW_FORMAT": "dynamic", "ENCRYPTED": True, "PACK_KEYS": True},
        {"ENGINE": "ColumnStore", "AUTO_INCREMENT": 1, "WITH_SYSTEM_VERSIONING": True},
    ],
)
def test_render_table_options_never_emits_disallowed_keywords(options):
    allowed = DEFAULT_TABLE_OPTIONS_CONFIG.keywords_for(options["ENGINE"])
    rendered = render_table_options(options)

    for keyword, token in TABLE_OPTION_TOKENS.items():
        if keyword in allowed or keyword == "ENGINE":
            continue
        assert f"{token} =" not in rendered
        assert not rendered.endswith(token)


def test_render_table_options_is_idempotent():
    options = {"ENGINE": "InnoDB", "ROW_FORMAT": "compressed", "KEY_BLOCK_SIZE": "8"}
    renderer = TableOptionsRenderer()
    assert renderer.render(options) == renderer.render(options) == render_table_options(options)


def test_renderer_uses_injected_config(custom_config, mocker: MockerFixture):
    spy = mocker.spy(table_options, "normalize_option_value")
    renderer = TableOptionsRenderer(custom_config)

    options = {
        "ENGINE": "Mroonga",
        "AUTO_INCREMENT": 10,
        "DATA_DIRECTORY": "/srv",
        "KEY_BLOCK_SIZE": 8,
    }
    assert renderer.render(options) == (
        " ENGINE = Mroonga,\n\tDATA DIRECTORY = '/srv',\n\tAUTO_INCREMENT = 10"
    )
    assert [call.args[0] for call in spy.call_args_list] == ["DATA_DIRECTORY", "AUTO_INCREMENT"]

    assert renderer.render({"ENGINE": "InnoDB", "WITH_SYSTEM_VERSIONING": True}) == (
        " ENGINE = InnoDB,\n\tWITH SYSTEM VERSIONING"
    )
    assert render_table_options({"KEY_BLOCK_SIZE": 8}, custom_config) == ""


def test_table_options_config_defaults():
    config = TableOptionsConfig()
    assert config.tokens == dict(TABLE_OPTION_TOKENS)
    assert config.default_keywords == DEFAULT_ENGINE_KEYWORDS
    assert config.keywords_for(None) == DEFAULT_ENGINE_KEYWORDS
    assert config.keywords_for("innodb") == DEFAULT_ENGINE_KEYWORDS
    assert config.keywords_for("InnoDB")[0] == "AUTO_INCREMENT"


def test_table_options_config_rejects_unknown_keywords():
    with pytest.raises(UnknownKeywordError) as ex:
        TableOptionsConfig(engines={"InnoDB": ("AUTO_INCREMENT", "BOGUS")})
    assert ex.value.engine == "InnoDB"
    assert ex.value.keyword == "BOGUS"

    with pytest.raises(ConfigError):
        TableOptionsConfig(tokens={}, engines={}, default_keywords=("PACK_KEYS",))


def test_default_table_options_config_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_TABLE_OPTIONS_CONFIG.engines["InnoDB"] = ("AUTO_INCREMENT",)  # type: ignore
    with pytest.raises(TypeError):
        DEFAULT_TABLE_OPTIONS_CONFIG.tokens["ROW_FORMAT"] = "FORMAT"  # type: ignore

    assert render_table_options({"ENGINE": "InnoDB", "ROW_FORMAT": "compact", "AUTO_INCREMENT": 1}) == (
        " ENGINE = InnoDB,\n\tAUTO_INCREMENT = 1,\n\tROW_FORMAT = COMPACT"
    )


def test_table_options_config_copies_its_tables():
    engines = {"Mroonga": ("AUTO_INCREMENT",)}
    config = TableOptionsConfig(engines=engines)
    engines["Mroonga"] = ("BOGUS",)
    assert config.keywords_for("Mroonga") == ("AUTO_INCREMENT",)
    with pytest.raises(TypeError):
        config.engines["Mroonga"] = ()  # type: ignore
