"""
Integration tests for the command line workflow
"""

import json

import pytest

from localetree.main import EXIT_ERROR, EXIT_OK, EXIT_UNTRANSLATED, main
from localetree.services.locale_store import LocaleStore


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestCompareCommand:
    def test_compare_prints_report(self, locales_dir, capsys):
        code = main(["compare", str(locales_dir / "en.json"), str(locales_dir / "fr.json"), "--list"])
        out = capsys.readouterr().out

        assert code == EXIT_OK
        assert "fr: 9 reference keys" in out
        assert "untranslated keys" in out
        assert "- auth.login.button: 'Sign in'" in out
        assert "+ club.legacy" in out

    def test_compare_strict_fails_on_gaps(self, locales_dir):
        code = main(["compare", str(locales_dir / "en.json"), str(locales_dir / "fr.json"), "--strict"])
        assert code == EXIT_UNTRANSLATED

    def test_compare_with_intentional_matches(self, locales_dir, matches_file, monkeypatch, tmp_path):
        monkeypatch.setenv("INTENTIONAL_MATCHES_FILE", str(matches_file))
        report_file = tmp_path / "untranslated-fr.json"

        code = main([
            "compare", str(locales_dir / "en.json"), str(locales_dir / "fr.json"),
            "--report-file", str(report_file), "--report-format", "nested",
        ])

        assert code == EXIT_OK
        assert _read(report_file) == {
            "common": {"cancel": "Cancel"},
            "auth": {"login": {"button": "Sign in"}},
        }

    def test_compare_missing_file(self, locales_dir, capsys):
        code = main(["compare", str(locales_dir / "en.json"), str(locales_dir / "xx.json")])
        assert code == EXIT_ERROR
        assert "xx.json" in capsys.readouterr().err

    def test_compare_malformed_file(self, locales_dir):
        (locales_dir / "it.json").write_text("{broken", encoding="utf-8")
        code = main(["compare", str(locales_dir / "en.json"), str(locales_dir / "it.json")])
        assert code == EXIT_ERROR

    def test_negative_top_is_rejected(self, locales_dir):
        with pytest.raises(SystemExit) as exc_info:
            main(["compare", str(locales_dir / "en.json"), str(locales_dir / "fr.json"), "--top", "-1"])
        assert exc_info.value.code == 2

    def test_unreadable_match_table_fails_compare(self, locales_dir, monkeypatch, tmp_path):
        monkeypatch.setenv("INTENTIONAL_MATCHES_FILE", str(tmp_path / "missing.json"))
        code = main(["compare", str(locales_dir / "en.json"), str(locales_dir / "fr.json")])
        assert code == EXIT_ERROR


class TestMergeCommand:
    def test_merge_flat_patch(self, locales_dir, tmp_path):
        patch = tmp_path / "patch.json"
        patch.write_text(json.dumps({"auth.login.button": "Se connecter", "common.cancel": "Annuler"}), encoding="utf-8")

        code = main(["merge", str(locales_dir / "fr.json"), str(patch)])
        fr = _read(locales_dir / "fr.json")

        assert code == EXIT_OK
        assert fr["auth"]["login"] == {"title": "Connexion", "button": "Se connecter"}
        assert fr["common"]["cancel"] == "Annuler"
        assert fr["club"]["legacy"] == "Ancien"

    def test_merge_fragment_at_root(self, locales_dir, tmp_path):
        patch = tmp_path / "patch.json"
        patch.write_text(json.dumps({"login": {"button": "Se connecter"}}), encoding="utf-8")

        code = main(["merge", str(locales_dir / "fr.json"), str(patch), "--root", "auth"])

        assert code == EXIT_OK
        assert _read(locales_dir / "fr.json")["auth"]["login"]["button"] == "Se connecter"

    def test_merge_dry_run_does_not_write(self, locales_dir, tmp_path, capsys):
        before = (locales_dir / "fr.json").read_bytes()
        patch = tmp_path / "patch.json"
        patch.write_text(json.dumps({"common.cancel": "Annuler"}), encoding="utf-8")

        code = main(["merge", str(locales_dir / "fr.json"), str(patch), "--dry-run"])

        assert code == EXIT_OK
        assert "would update 1 keys" in capsys.readouterr().out
        assert (locales_dir / "fr.json").read_bytes() == before

    @pytest.mark.parametrize("patch_data", [{"a..b": "x"}, {"": "x"}])
    def test_merge_invalid_key_path(self, locales_dir, tmp_path, patch_data):
        before = (locales_dir / "fr.json").read_bytes()
        patch = tmp_path / "patch.json"
        patch.write_text(json.dumps(patch_data), encoding="utf-8")

        code = main(["merge", str(locales_dir / "fr.json"), str(patch)])

        assert code == EXIT_ERROR
        assert (locales_dir / "fr.json").read_bytes() == before

    def test_merge_missing_patch(self, locales_dir, tmp_path):
        code = main(["merge", str(locales_dir / "fr.json"), str(tmp_path / "missing.json")])
        assert code == EXIT_ERROR

    def test_merge_does_not_need_match_table(self, locales_dir, monkeypatch, tmp_path):
        monkeypatch.setenv("INTENTIONAL_MATCHES_FILE", str(tmp_path / "missing.json"))
        patch = tmp_path / "patch.json"
        patch.write_text(json.dumps({"common.cancel": "Annuler"}), encoding="utf-8")

        code = main(["merge", str(locales_dir / "fr.json"), str(patch)])

        assert code == EXIT_OK
        assert _read(locales_dir / "fr.json")["common"]["cancel"] == "Annuler"


class TestStatusAndFillCommands:
    def test_status(self, locales_dir, capsys):
        code = main(["--locales-dir", str(locales_dir), "status"])
        out = capsys.readouterr().out

        assert code == EXIT_OK
        assert "de:   0.0% translated, 9 untranslated" in out
        assert "fr:  33.3% translated" in out

    def test_status_strict(self, locales_dir):
        assert main(["--locales-dir", str(locales_dir), "status", "--strict"]) == EXIT_UNTRANSLATED

    def test_status_with_configured_targets(self, locales_dir, monkeypatch, capsys):
        monkeypatch.setenv("TARGET_LANGUAGES", "fr")
        main(["--locales-dir", str(locales_dir), "status"])
        out = capsys.readouterr().out
        assert "fr:" in out
        assert "de:" not in out

    def test_status_reference_also_target(self, locales_dir, monkeypatch):
        monkeypatch.setenv("TARGET_LANGUAGES", "fr")
        assert main(["--locales-dir", str(locales_dir), "--reference", "fr", "status"]) == EXIT_ERROR

    def test_fill_adds_missing_keys_only(self, locales_dir):
        code = main(["--locales-dir", str(locales_dir), "fill", "fr", "--placeholder", "todo"])
        fr = _read(locales_dir / "fr.json")

        assert code == EXIT_OK
        assert fr["auth"]["login"]["button"] == "TODO: Sign in"
        # identical-but-present values are left for translators
        assert fr["common"]["cancel"] == "Cancel"

    def test_fill_empty_locale_with_keys(self, locales_dir):
        main(["--locales-dir", str(locales_dir), "fill", "de", "--placeholder", "key"])
        de = _read(locales_dir / "de.json")

        assert de["auth"]["register"]["title"] == "auth.register.title"
        assert list(de) == ["common", "auth", "club", "languages"]

    @pytest.mark.parametrize("key", ["e.g", "e.g.", "Mr."])
    def test_fill_keys_containing_dots(self, locales_dir, key, capsys):
        store = LocaleStore()
        store.write_json(locales_dir / "en.json", {"abbr": {key: key}})
        store.write_json(locales_dir / "fr.json", {})

        assert main(["--locales-dir", str(locales_dir), "fill", "fr", "--placeholder", "copy"]) == EXIT_OK
        assert _read(locales_dir / "fr.json") == {"abbr": {key: key}}

        capsys.readouterr()
        main(["--locales-dir", str(locales_dir), "fill", "fr", "--placeholder", "copy"])
        assert "updated 0 keys" in capsys.readouterr().out

        code = main(["compare", str(locales_dir / "en.json"), str(locales_dir / "fr.json"), "--list"])
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "not in the reference" not in out

    def test_invalid_configuration(self, monkeypatch, capsys):
        monkeypatch.setenv("LOCALE_INDENT", "wide")
        assert main(["status"]) == EXIT_ERROR
        assert "Configuration error" in capsys.readouterr().err
