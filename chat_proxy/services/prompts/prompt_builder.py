"""
Prompt assembly for chat completion requests.

A prompt is a single optional system message, one user message and a bag of
generation options. Options only carry values the caller supplied, so the
chat client's own defaults apply to everything else.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class Prompt:
    """System instruction, user instruction and generation options."""

    user_message: str
    system_message: Optional[str] = None
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def to_messages(self) -> List[Dict[str, str]]:
        """Render the prompt as chat completion messages, system first."""
        messages = []
        if self.system_message:
            messages.append({"role": "system", "content": self.system_message})
        messages.append({"role": "user", "content": self.user_message})
        return messages


def build_prompt(
    user_message: str,
    system_message: Optional[str] = None,
    temperature: Optional[float] = None,
) -> Prompt:
    """
    Build a prompt from a user message and optional system message/temperature.

    Args:
        user_message: Text of the user instruction (must not be empty)
        system_message: Optional system instruction, dropped when empty
        temperature: Optional sampling temperature override

    Returns:
        Prompt ready to hand to a chat completion client

    Raises:
        ValueError: If user_message is None or empty
    """
    if not user_message:
        raise ValueError("user_message must not be empty")

    options: Dict[str, Any] = {}
    if temperature is not None:
        options["temperature"] = temperature

    return Prompt(
        user_message=user_message,
        system_message=system_message or None,
        options=MappingProxyType(options),
    )
