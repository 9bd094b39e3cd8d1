import pytest

from chat_proxy.services.prompts import build_prompt


def test_user_message_only():
    prompt = build_prompt("Hello there")

    assert prompt.to_messages() == [{"role": "user", "content": "Hello there"}]
    assert prompt.system_message is None
    assert "temperature" not in prompt.options


def test_system_message_comes_first():
    prompt = build_prompt("What is 2 + 2?", system_message="Answer tersely.")

    assert prompt.to_messages() == [
        {"role": "system", "content": "Answer tersely."},
        {"role": "user", "content": "What is 2 + 2?"},
    ]


def test_empty_system_message_is_dropped():
    prompt = build_prompt("Hi", system_message="")

    assert prompt.system_message is None
    assert [m["role"] for m in prompt.to_messages()] == ["user"]


@pytest.mark.parametrize("temperature", [0.0, 0.35, 1.0, 2.0])
def test_temperature_carried_exactly(temperature):
    prompt = build_prompt("Hi", temperature=temperature)

    assert prompt.options == {"temperature": temperature}


def test_options_are_read_only():
    prompt = build_prompt("Hi", temperature=0.5)

    with pytest.raises(TypeError):
        prompt.options["temperature"] = 1.5


@pytest.mark.parametrize("user_message", [None, ""])
def test_missing_user_message_rejected(user_message):
    with pytest.raises(ValueError):
        build_prompt(user_message)
