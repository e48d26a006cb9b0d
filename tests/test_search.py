"""Unit tests for title/artist normalization used in lyric lookups."""

import pytest

from ttml_lyrics.api.search import clean_artist, clean_title


class TestCleanTitle:
    """Video and lyric decorations are removed from titles."""

    @pytest.mark.parametrize("raw, expected", [
        ("Bohemian Rhapsody (Official Video)", "Bohemian Rhapsody"),
        ("Hello [Lyrics]", "Hello"),
        ("Hello (Remastered 2011)", "Hello"),
        ("Song 【MV】", "Song"),
        ("Song | Live at Wembley", "Song"),
        ("Song - Official Audio", "Song"),
        ("  Yesterday  ", "Yesterday"),
    ])
    def test_decorations_removed(self, raw, expected):
        assert clean_title(raw) == expected

    def test_plain_parenthetical_kept(self):
        assert clean_title("Don't Stop (Believin')") == "Don't Stop (Believin')"

    def test_case_insensitive(self):
        assert clean_title("Song (OFFICIAL MUSIC VIDEO)") == "Song"

    def test_hyphenated_title_kept(self):
        assert clean_title("Ob-La-Di, Ob-La-Da") == "Ob-La-Di, Ob-La-Da"


class TestCleanArtist:
    """Only the first credited artist is kept."""

    @pytest.mark.parametrize("raw, expected", [
        ("Simon & Garfunkel", "Simon"),
        ("Artist feat. Other", "Artist"),
        ("Artist ft. Other", "Artist"),
        ("Artist Featuring Other", "Artist"),
        ("A, B, C", "A"),
        ("DJ X Singer", "DJ"),
        ("Solo Artist", "Solo Artist"),
        ("  Padded  ", "Padded"),
    ])
    def test_first_artist(self, raw, expected):
        assert clean_artist(raw) == expected

    def test_case_changing_characters_before_separator(self):
        # "İ".lower() is two code points; the cut must still land on " & "
        assert clean_artist("İİ & B") == "İİ"

    def test_uppercase_separator(self):
        assert clean_artist("Artist FEAT. Other") == "Artist"

    def test_first_separator_in_list_order_wins(self):
        # " & " is checked before ", "
        assert clean_artist("A, B & C") == "A, B"
