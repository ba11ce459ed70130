"""
Tests for the highscore file.
"""
import pytest
from yahtzee.core.highscores import Highscore, HighscoreTable, HighscoreError


class TestHighscoreTable:

    def test_missing_file_is_empty(self, tmp_path):
        table = HighscoreTable(tmp_path / "highscores.txt").load()
        assert len(table) == 0
        assert table.is_new_highscore(0)

    def test_load_skips_malformed_lines(self, tmp_path):
        path = tmp_path / "highscores.txt"
        path.write_text("alice: 210\nnot a score\nbob: lots\ncarol: 250\na:b:3\n", encoding="utf-8")
        table = HighscoreTable(path).load()
        assert [(h.name, h.score) for h in table.entries] == [("carol", 250), ("alice", 210)]

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "scores" / "highscores.txt"
        table = HighscoreTable(path)
        table.add("alice", 180)
        table.add("bob", 220)
        table.save()

        assert path.read_text(encoding="utf-8") == "bob: 220\nalice: 180\n"
        reloaded = HighscoreTable(path).load()
        assert [str(h) for h in reloaded.entries] == ["bob: 220", "alice: 180"]

    def test_add_keeps_descending_order_and_equal_scores_stay_ahead(self):
        table = HighscoreTable("unused.txt")
        assert table.add("a", 100) == 0
        assert table.add("b", 200) == 0
        assert table.add("c", 100) == 2
        assert table.add("d", 150) == 1
        assert [h.name for h in table.entries] == ["b", "d", "a", "c"]

    def test_is_new_highscore(self):
        table = HighscoreTable("unused.txt")
        table.add("a", 200)
        assert table.is_new_highscore(201)
        assert not table.is_new_highscore(200)

    def test_names_are_cleaned(self):
        table = HighscoreTable("unused.txt")
        table.add("  ", 10)
        table.add("x:y", 5)
        assert [h.name for h in table.entries] == ["Anonymous", "x y"]

    def test_top(self):
        table = HighscoreTable("unused.txt")
        for score in range(15):
            table.add(f"p{score}", score)
        assert [h.score for h in table.top(3)] == [14, 13, 12]

    def test_unreadable_path_raises(self, tmp_path):
        table = HighscoreTable(tmp_path)  # a directory, not a file
        with pytest.raises(HighscoreError):
            table.load()
        with pytest.raises(HighscoreError):
            table.save()

    def test_undecodable_file_raises(self, tmp_path):
        path = tmp_path / "highscores.txt"
        path.write_bytes(b"alice: 10\n\xff\xfe bad: 3\n")
        with pytest.raises(HighscoreError):
            HighscoreTable(path).load()


class TestHighscore:

    def test_parse(self):
        assert Highscore.parse("zoe: 77\n") == Highscore("zoe", 77)

    def test_parse_rejects_extra_colons(self):
        with pytest.raises(ValueError):
            Highscore.parse("a:b:1")
