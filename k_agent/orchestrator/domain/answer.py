"""FinalAnswer value object — the outcome of one orchestrator run."""

from pydantic import BaseModel

from k_agent.conversation.domain.turn import Turn

NO_ACTION_TEXT = "No further action taken."


class FinalAnswer(BaseModel, frozen=True):
    """Final text of a run plus the conversation that produced it.

    no_action is True when the model returned an empty response; text is then
    NO_ACTION_TEXT.
    """

    text: str
    no_action: bool = False
    tool_rounds: int
    turns: list[Turn] = []
