import pytest

pytest.importorskip("PyQt6.QtWidgets")

from hoverpie.ui.theme import ThemeManager

@pytest.fixture
def theme_manager(qapp):
    return ThemeManager()

def test_palettes_follow_theme(theme_manager):
    assert theme_manager.get_hex("chart.background") == "#ffffff"

    theme_manager.set_theme("dark")

    assert theme_manager.is_dark()
    assert theme_manager.get_hex("chart.background") == "#202020"

def test_theme_changed_only_on_switch(theme_manager):
    emitted = []
    theme_manager.theme_changed.connect(lambda: emitted.append(True))

    theme_manager.set_theme("light")
    theme_manager.set_theme("dark")
    theme_manager.set_theme("dark")

    assert emitted == [True]

def test_unknown_theme(theme_manager):
    with pytest.raises(ValueError):
        theme_manager.set_theme("sepia")

def test_missing_key_falls_back_to_black(theme_manager):
    assert theme_manager.get_hex("no.such.key") == "#000000"

def test_tooltip_stylesheet_uses_palette(theme_manager):
    assert "#1e000000" in theme_manager.tooltip_stylesheet().lower()
