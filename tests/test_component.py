import pytest

from steelmc.text.click import OpenUrl, RunCommand
from steelmc.text.color import ARGBColor, NamedColor, ResetColor, RGBColor
from steelmc.text.component import (
    Custom,
    EntityNames,
    Keybind,
    ShowEntity,
    ShowItem,
    ShowText,
    Style,
    Text,
    TextComponent,
    TextComponentBase,
    Translate,
    hover_event_from_json,
    hover_event_to_json,
    show_entity,
    show_text,
)
from steelmc.text.locale import Locale


def test_plain_text():
    assert TextComponent.text("hello").to_json() == {"text": "hello"}


def test_translate_without_arguments_omits_with():
    key = "multiplayer.disconnect.authservers_down"
    assert TextComponent.translate(key, []).to_json() == {"translate": key}


def test_translate_with_arguments():
    component = TextComponent.translate("k", [TextComponent.text("a")])
    assert component.to_json() == {"translate": "k", "with": [{"text": "a"}]}
    assert TextComponent.from_json(component.to_json()) == component


def test_empty_style():
    assert Style().to_json() == {}
    assert Style.from_json({}) == Style()


def test_style_shape():
    style = Style(color=NamedColor.RED, bold=True)
    assert style.to_json() == {"color": "red", "bold": True}


def test_reset_colour_is_null_and_reads_back_as_unset():
    style = Style(color=ResetColor.RESET)
    assert style.to_json() == {"color": None}
    assert Style.from_json(style.to_json()).color is None


def test_shadow_colour_key():
    style = Style(shadow_color=ARGBColor(1, 2, 3, 4))
    assert style.to_json() == {"shadow_color": [1, 2, 3, 4]}
    assert Style.from_json(style.to_json()) == style


def test_full_round_trip():
    base = TextComponentBase(
        Text("root"),
        Style(
            color=RGBColor(1, 2, 3),
            italic=False,
            underlined=True,
            strikethrough=False,
            obfuscated=True,
            insertion="ins",
            click_event=RunCommand("/help"),
            hover_event=show_text(TextComponent.text("tip")),
            font="uniform",
        ),
        (TextComponentBase(Keybind("key.jump")), TextComponentBase(EntityNames("@a", ", "))),
    )
    assert TextComponentBase.from_json(base.to_json()) == base


def test_style_ignores_content_keys():
    data = TextComponentBase(Text("x"), Style(click_event=OpenUrl("https://example.com"))).to_json()
    assert Style.from_json(data) == Style(click_event=OpenUrl("https://example.com"))


def test_show_text_helper():
    tip = TextComponent.text("tip")
    event = show_text(tip)
    assert event == ShowText((tip.base,))
    assert hover_event_to_json(event) == {"action": "show_text", "value": [{"text": "tip"}]}


def test_show_entity_without_name():
    event = show_entity("uuid-string", "minecraft:pig", None)
    assert event == ShowEntity(id="minecraft:pig", uuid="uuid-string")
    assert "name" not in hover_event_to_json(event)


def test_show_entity_with_name_round_trip():
    event = show_entity("uuid-string", "minecraft:pig", TextComponent.text("Bob"))
    assert event.name == (TextComponent.text("Bob").base,)
    assert hover_event_from_json(hover_event_to_json(event)) == event


def test_show_item_count_optional():
    assert "count" not in hover_event_to_json(ShowItem("minecraft:stone"))
    event = ShowItem("minecraft:stone", 5)
    assert hover_event_from_json(hover_event_to_json(event)) == event


@pytest.mark.parametrize(
    "data",
    [
        {"action": "nothing"},
        {"action": "show_item"},
        {"action": "show_item", "id": "x", "count": "many"},
        {"action": "show_entity", "id": "x"},
        "show_text",
    ],
)
def test_bad_hover(data):
    with pytest.raises(ValueError):
        hover_event_from_json(data)


def test_text_wins_over_other_content():
    assert TextComponentBase.from_json({"text": "a", "keybind": "b"}).content == Text("a")


def test_wrongly_typed_text_falls_through():
    assert TextComponentBase.from_json({"text": 5, "keybind": "b"}).content == Keybind("b")


def test_entity_names_round_trip():
    base = TextComponentBase(EntityNames("@e"))
    assert base.to_json() == {"selector": "@e"}
    assert TextComponentBase.from_json(base.to_json()) == base


@pytest.mark.parametrize(
    "data",
    [{}, {"text": 5}, {"translate": "k", "with": None}, {"color": "red"}, ["text"]],
)
def test_unmatched_content(data):
    with pytest.raises(ValueError):
        TextComponentBase.from_json(data)


def test_null_extra_rejected():
    with pytest.raises(ValueError):
        TextComponentBase.from_json({"text": "a", "extra": None})


def test_bad_style_value_rejected():
    with pytest.raises(ValueError):
        TextComponentBase.from_json({"text": "a", "bold": "yes"})


def test_custom_cannot_be_serialized():
    base = TextComponentBase(Custom("my.key", Locale.EN_US))
    with pytest.raises(ValueError, match="cannot be serialized"):
        base.to_json()


def test_translate_content_fields():
    component = TextComponent.translate("k", [TextComponent.text("a"), TextComponent.text("b")])
    assert component.base.content == Translate(
        "k", (TextComponent.text("a").base, TextComponent.text("b").base)
    )


def test_components_are_hashable():
    first = TextComponent.text("same")
    second = TextComponent.text("same")
    assert {first, second} == {first}