"""
Testes para o CLI (tocer.cli.main).
"""

import json

from tocer.cli import main


class TestCli:

    def test_prints_tags_and_files(self, toc_file, capsys):
        rc = main([str(toc_file)])
        out = capsys.readouterr().out
        assert rc == 0
        assert "  Interface: 11302" in out
        assert "Arquivos (4):" in out
        assert "  main.lua" in out

    def test_json_output(self, toc_file, capsys):
        rc = main([str(toc_file), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert rc == 0
        assert data["tags"]["Title"] == "|cff20ff20Bagnon|r"
        assert data["files"][0] == "libs\\LibStub\\LibStub.lua"
        assert data["stats"]["lines_read"] == 13

    def test_legacy_values(self, tmp_path, capsys):
        path = tmp_path / "Legacy.toc"
        path.write_text("## e : Bagnon_Sets \n", encoding="utf-8")
        rc = main([str(path), "--json", "--legacy-values"])
        data = json.loads(capsys.readouterr().out)
        assert rc == 0
        assert data["tags"]["e"] == "Bagnon_Sets "

    def test_missing_file_exits_nonzero(self, tmp_path, capsys):
        rc = main([str(tmp_path / "nao_existe.toc")])
        assert rc == 1
        assert capsys.readouterr().out == ""

    def test_undecodable_file_exits_nonzero(self, tmp_path):
        path = tmp_path / "Bad.toc"
        path.write_bytes(b"a.lua\n\xff\n")
        assert main([str(path)]) == 1

    def test_unknown_log_level_does_not_crash(self, toc_file, monkeypatch):
        from tocer.config import config

        monkeypatch.setattr(config, "log_level", "VERBOSE")
        assert main([str(toc_file)]) == 0
