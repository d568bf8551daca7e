import sys

from translatefree.errors import TranslatorError
from translatefree.services.translation_service import translate


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("Usage: python -m translatefree.translate_cli <text> <target> [source]", file=sys.stderr)
        return 1

    text, target = args[0], args[1]
    source = args[2] if len(args) > 2 else "auto"

    print(f"🌍 Translating | {source} → {target}")

    try:
        result = translate(text, source, target)
    except TranslatorError as e:
        print(f"❌ Translation failed ({e.kind}): {e}", file=sys.stderr)
        return 2 if e.retryable else 1

    print(f"📖 {result.orig}")
    print(f"✅ {result.trans}")

    if result.alternatives:
        print("🔤 Alternatives:")
        for alternative in result.alternatives:
            print(f"   - {alternative}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
