import requests

from translatefree.translate_cli import main


def test_prints_translation_and_alternatives(fake_get, capsys):
    calls = fake_get({
        "sentences": [{"orig": "Hello", "trans": "Bonjour"}],
        "alternative_translations": [{"alternative": [{"word_postproc": "Salut"}]}],
    })

    assert main(["Hello", "fr", "en"]) == 0

    out = capsys.readouterr().out
    assert "Bonjour" in out
    assert "- Salut" in out
    assert "&sl=en&tl=fr&" in calls[0]["url"]


def test_source_defaults_to_auto(fake_get):
    calls = fake_get({"sentences": [{"orig": "Hola", "trans": "Hello"}]})

    assert main(["Hola", "en"]) == 0
    assert "&sl=auto&tl=en&" in calls[0]["url"]


def test_usage_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_transport_error_exit_code(fake_get, capsys):
    fake_get(b"", exc=requests.ConnectionError("no route to host"))

    assert main(["Hello", "fr"]) == 2
    assert "transport" in capsys.readouterr().err


def test_no_content_exit_code(fake_get, capsys):
    fake_get({"sentences": []})

    assert main(["", "fr"]) == 1
    assert "no_content" in capsys.readouterr().err
