"""
Prompt templates and message builders for the agents.

All default system instructions live here so they can be tuned in one place.
"""

from dataclasses import dataclass

CONTEXT_SEPARATOR = "Provided context:"

RESEARCHER_SYSTEM = """You are an agent.

You will receive a question that may be quite short or does not have much context.
Your job is to research the Internet and to return with a high-quality summary to the user, assisted by the provided context.
The provided context will be in JSON format and contains data about the initial Google results for the website or query.

Be concise.

Question:
"""

WRITER_SYSTEM = """You are an agent.

You will receive some context from another agent about some Google results that a user has searched.
Your job is to write a high-quality article based on that research, as if the user had written it. The article must not appear to be AI written.
The article should be SEO optimised without overly compromising the quality of the article.

You are free to be as creative as you wish. However, each paragraph must have the following:
- The point you are trying to make
- If there is a follow up action point
- Why the follow up action point exists (or why the user needs to carry it out)

Search query:
"""


@dataclass(frozen=True)
class PromptRequest:
    """One agent call: the caller's task plus the text that grounds it."""

    instruction: str
    context: str

    def user_content(self) -> str:
        """Instruction first, then the separator line, then the context verbatim."""
        return f"{self.instruction}\n\n{CONTEXT_SEPARATOR}\n{self.context}"


def build_messages(system_instruction: str, request: PromptRequest) -> list[dict[str, str]]:
    """Exactly two messages, system then user; the role lives in the message boundary."""
    return [
        {"role": "system", "content": system_instruction},
        {"role": "user", "content": request.user_content()},
    ]
