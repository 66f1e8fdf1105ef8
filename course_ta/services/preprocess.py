"""
Message preprocessing before embedding.

The raw student message is lower-cased and split into sentences; the
sentences are sent to the embedding endpoint as one batch. Text after
the last terminator is kept as its own trailing fragment rather than
dropped, so the batch can hold one more entry than a strict sentence
match would give. The first fragment, which supplies the query vector,
is the same either way unless the message has no terminator at all.
"""

import re

# A run of non-terminators, one or more of . ! ?, then whitespace or end of input
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+(?:\s|$)")


def preprocess_message(message: str) -> list[str]:
    """
    Lower-case and sentence-split a message.

    Examples:
        "What is least privilege?"      -> ["what is least privilege?"]
        "Hi there. What is PII? Thanks" -> ["hi there.", "what is pii?", "thanks"]
        "no punctuation here"           -> ["no punctuation here"]
    """
    text = message.lower()

    sentences = []
    end = 0
    for match in SENTENCE_PATTERN.finditer(text):
        sentences.append(match.group().strip())
        end = match.end()

    if not sentences:
        return [text.strip()]

    tail = text[end:].strip()
    if tail:
        sentences.append(tail)

    return [s for s in sentences if s]
