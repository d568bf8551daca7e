from __future__ import annotations

from translatefree.models import RawResult, TranslationResult


def flatten(raw: RawResult) -> TranslationResult:
    origs = []
    trans = []
    for sentence in raw.sentences:
        origs.append(sentence.orig)
        trans.append(sentence.trans)

    alternatives = [
        alternative.word_postproc
        for group in raw.alternative_translations
        for alternative in group.alternative
    ]

    return TranslationResult(
        orig="".join(origs),
        trans="".join(trans),
        alternatives=alternatives,
    )
