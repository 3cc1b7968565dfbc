"""Unit tests for simplechalk.engine.chaining module."""

import pytest

from simplechalk.engine.chaining import Chalk
from simplechalk.models.config import RenderContext
from simplechalk.models.output import ConsoleMessage
from simplechalk.models.style import StyleName, Surface

RESET = "\x1b[0m"

COLOR_CODES = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "gray": "\x1b[90m",
    "grey": "\x1b[90m",
    "blueBright": "\x1b[36m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "underline": "\x1b[4m",
}


@pytest.fixture
def chalk(forced) -> Chalk:
    """Chaining styler with FORCE_COLOR set."""
    return Chalk.from_settings(forced)


@pytest.mark.unit
class TestChalkBasics:
    """Tests for single styles and the base call."""

    @pytest.mark.parametrize(("name", "code"), sorted(COLOR_CODES.items()))
    def test_single_style(self, chalk: Chalk, name: str, code: str) -> None:
        """Test each style wraps the text with its code and a reset."""
        assert getattr(chalk, name)("test") == f"{code}test{RESET}"

    def test_base_call_returns_input(self, chalk: Chalk) -> None:
        """Test the base styler never styles."""
        assert chalk("test") == "test"

    def test_base_call_returns_input_on_css(self, browser_settings) -> None:
        """Test the base styler returns a bare string even on CSS."""
        chalk = Chalk.from_settings(browser_settings, surface=Surface.CSS)
        assert chalk("test") == "test"

    def test_aliases_render_identically(self, chalk: Chalk) -> None:
        """Test grey matches gray and blueBright matches cyan."""
        assert chalk.grey("x") == chalk.gray("x")
        assert chalk.blueBright("x") == chalk.cyan("x")


@pytest.mark.unit
class TestChalkChaining:
    """Tests for chained composition."""

    def test_red_bold(self, chalk: Chalk) -> None:
        """Test two styles render in accumulation order."""
        assert chalk.red.bold("x") == "\x1b[31m\x1b[1mx\x1b[0m"

    def test_order_matters(self, chalk: Chalk) -> None:
        """Test reversing the chain reverses the directives."""
        assert chalk.bold.red("x") == "\x1b[1m\x1b[31mx\x1b[0m"
        assert chalk.bold.red("x") != chalk.red.bold("x")

    def test_deep_chain_with_repeats(self, chalk: Chalk) -> None:
        """Test arbitrary depth, repeats and modifier-after-modifier."""
        styled = chalk.bold.dim.underline.bold.green
        assert styled("x") == "\x1b[1m\x1b[2m\x1b[4m\x1b[1m\x1b[32mx" + RESET
        assert styled.chain.styles[-1] is StyleName.GREEN
        assert len(styled.chain) == 5

    def test_branches_are_independent(self, chalk: Chalk) -> None:
        """Test extending one base twice gives independent chains."""
        warn = chalk.yellow
        loud = warn.bold
        quiet = warn.dim
        assert warn("x") == "\x1b[33mx" + RESET
        assert loud("x") == "\x1b[33m\x1b[1mx" + RESET
        assert quiet("x") == "\x1b[33m\x1b[2mx" + RESET

    def test_access_is_idempotent(self, chalk: Chalk) -> None:
        """Test each access builds a fresh but equivalent styler."""
        first = chalk.red
        second = chalk.red
        assert first is not second
        assert first.chain == second.chain
        assert first("x") == second("x")
        assert len(chalk.chain) == 0


@pytest.mark.unit
class TestChalkDisabled:
    """Tests for disabled contexts."""

    @pytest.mark.parametrize("name", ["NO_COLOR", "MCP_MODE"])
    def test_disabled_returns_text_at_any_depth(self, make_settings, name) -> None:
        """Test disabling wins over FORCE_COLOR for every chain."""
        chalk = Chalk.from_settings(make_settings(FORCE_COLOR="1", **{name: "1"}))
        assert chalk.enabled is False
        assert chalk.red("x") == "x"
        assert chalk.red.bold.underline("x") == "x"

    def test_empty_force_color_without_tty(self, make_settings) -> None:
        """Test an empty FORCE_COLOR leaves piped output plain."""
        chalk = Chalk.from_settings(make_settings(tty=False, FORCE_COLOR=""))
        assert chalk.red("x") == "x"
        assert chalk.red.bold("x") == "x"

    def test_no_color_example(self, make_settings) -> None:
        """Test NO_COLOR yields the input unchanged."""
        assert Chalk.from_settings(make_settings(NO_COLOR="1")).red("x") == "x"

    def test_disabled_css_returns_single_element(self, make_settings) -> None:
        """Test a disabled CSS chain yields [text]."""
        settings = make_settings(
            browser={"window": 1, "document": 1, "NO_COLOR": True}
        )
        chalk = Chalk.from_settings(settings, surface=Surface.CSS)
        assert chalk.red.bold("x") == ["x"]


@pytest.mark.unit
class TestChalkSurfaces:
    """Tests for surface selection."""

    def test_browser_context_defaults_to_ansi(self, browser_settings) -> None:
        """Test the chaining styler emits ANSI codes unless told otherwise."""
        chalk = Chalk.from_settings(browser_settings)
        assert chalk.red("x") == "\x1b[31mx" + RESET

    def test_css_surface(self, browser_settings) -> None:
        """Test a CSS chain joins fragments in order."""
        chalk = Chalk.from_settings(browser_settings, surface=Surface.CSS)
        result = chalk.red.bold("x")
        assert isinstance(result, ConsoleMessage)
        assert result == ["%cx", "color: #ff0000; font-weight: bold;"]

    def test_explicit_context(self) -> None:
        """Test a context can be injected directly."""
        chalk = Chalk(RenderContext(surface=Surface.ANSI, enabled=True))
        assert chalk.dim("x") == "\x1b[2mx" + RESET


@pytest.mark.unit
class TestChalkAttributes:
    """Tests for attribute protocol behaviour."""

    def test_unknown_attribute_raises(self, chalk: Chalk) -> None:
        """Test names outside the closed set are missing attributes."""
        with pytest.raises(AttributeError, match="orange"):
            _ = chalk.orange
        assert not hasattr(chalk.red, "blue_bright")
        assert getattr(chalk, "purple", None) is None

    def test_dir_lists_styles(self, chalk: Chalk) -> None:
        """Test dir() exposes every style name."""
        names = dir(chalk)
        for style in StyleName:
            assert style.value in names

    def test_repr(self, chalk: Chalk) -> None:
        """Test repr shows the chain and mode."""
        assert repr(chalk.red.bold) == "<Chalk red.bold mode=ansi-terminal>"
        assert repr(chalk) == "<Chalk (base) mode=ansi-terminal>"
