from .prompt_builder import Prompt, build_prompt

__all__ = [
    "Prompt",
    "build_prompt",
]
