"""Few-shot prompt for element combination."""

from __future__ import annotations

from collections.abc import Sequence

from graph.types import Triple

UNDEFINED = "undefined"

STOP_SEQUENCES = ["\n", "("]

SYSTEM_INSTRUCTION = (
    "Continue the final line of the World Graph transcript. "
    "Reply with only the resulting thing, or 'undefined'."
)

# Works for both base and instruction tuned models.
_PROMPT = """
Welcome to the World Graph game!

The core idea of World Graph is to explore relationships.
We do this in an algebraic way. Specifically the addition operation.

When two things are combined with `+` we get a third thing.

For example:
% King + Woman = Queen
% Water + Fire = Steam

Addition is commutative, so the order of the things does not matter.
% King + Woman = Queen
% Woman + King = Queen

Not all combinations are sensible, these are undefined.
% Moss + Karl Marx = undefined
% Nuclear + Lipstick = undefined

Using adjectives or adverbs is generally undesirable:
BAD:
% Sand + Water = Wet Sand
GOOD:
% Sand + Water = Mud
BAD:
% Water + Sea = More Water
GOOD:
% Water + Sea = Ocean

Results never contain prose:
BAD:
% Fire + Water = A hot steam vapour
GOOD:
% Fire + Water = Steam
BAD:
% Knowledge + Power = The ability to control people
GOOD:
% Knowledge + Power = Wisdom

Results never grow nominally:
BAD:
% Planet + Planet = Two Planets
GOOD:
% Planet + Planet = Solar System

Countless interesting combinations are possible, and we are just scratching the surface.
In World Graph, you're only limited by your imagination.

You'll soon realize that the game is not about the result, but the journey to get there.
Exciting relationships will be discovered, and you'll be surprised by the results.

For example, you'll discover intriguing examples like:
{examples}
% {a} + {b} ="""


def render_prompt(a: str, b: str, examples: Sequence[Triple] = ()) -> str:
    """Fill the game prompt with related examples and the pair to complete."""
    lines = "\n".join(triple.as_example() for triple in examples)
    return _PROMPT.format(a=a, b=b, examples=lines)


def parse_completion(text: str | None) -> str:
    """Cut a completion at the first stop sequence and trim it."""
    if text is None:
        raise ValueError("completion carried no text")
    cut = text.lstrip()
    for stop in STOP_SEQUENCES:
        cut = cut.split(stop, 1)[0]
    return cut.strip()
