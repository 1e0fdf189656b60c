import pytest

from deck.__main__ import main


def test_cli_prints_plain_deck(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 52
    assert lines[0] == "Ace of Spades"
    assert lines[-1] == "King of Hearts"


def test_cli_applies_options(capsys):
    main(["--jokers", "2", "--decks", "2", "--exclude-rank", "two", "--exclude-rank", "Four"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == (44 + 2) * 2
    assert lines.count("Joker") == 4
    assert not any(line.startswith(("Two ", "Four ")) for line in lines)


def test_cli_seeded_shuffle_is_reproducible(capsys):
    main(["--seed", "7", "--deal", "5"])
    first = capsys.readouterr().out.splitlines()
    main(["--seed", "7", "--deal", "5"])
    second = capsys.readouterr().out.splitlines()
    assert len(first) == 5
    assert first == second


def test_cli_descending_sort(capsys):
    main(["--sort", "desc", "--deal", "1"])
    assert capsys.readouterr().out.splitlines() == ["King of Hearts"]


@pytest.mark.parametrize(
    "argv",
    [
        ["--exclude-rank", "Zero"],
        ["--jokers", "-1"],
        ["--sort", "sideways"],
        ["--deal", "60"],
        ["--sort", "desc", "--seed", "7"],
    ],
)
def test_cli_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
