from __future__ import annotations

import json

TRANSLATION_FIELD = "translation"
TIPS_FIELD = "tips"

_EXAMPLE_RESPONSE = {
    TRANSLATION_FIELD: "how to make money really quick",
    TIPS_FIELD: [
        "Great job sounding out 'really'!",
        "The 'k' sound can be made by both 'k' and 'c'",
    ],
}

_TEMPLATE = """Act as a helpful teacher. Given this text written by a child learning to spell:
"{text}"

Please provide:
1. The correct spelling
2. 2-3 encouraging tips about their spelling attempt

Format the response as JSON with "{translation_field}" and "{tips_field}" fields.

Example response format:
{example}
"""


def build_prompt(input_text: str) -> str:
    """
    Wrap the learner's text in the fixed spelling-coach instructions.

    The text is embedded verbatim between double quotes; nothing is escaped.
    """
    return _TEMPLATE.format(
        text=input_text,
        translation_field=TRANSLATION_FIELD,
        tips_field=TIPS_FIELD,
        example=json.dumps(_EXAMPLE_RESPONSE, indent=2),
    )
