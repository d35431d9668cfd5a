from click.testing import CliRunner

from tracker.cli import main


def test_users_command(data_dir):
    runner = CliRunner()
    result = runner.invoke(main, ["users", "--data-dir", str(data_dir)])
    assert result.exit_code == 0, result.output
    assert result.output.split() == ["1", "2", "4", "10"]


def test_stats_command(data_dir):
    runner = CliRunner()
    result = runner.invoke(main, ["stats", "--data-dir", str(data_dir), "--user-id", "1"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith("Question")
    rows = dict(
        tuple(part.strip() for part in line.split(" | ", 1)) for line in lines[2:]
    )
    assert rows["Most listened song (count)"] == "X - T1"
    assert rows["Most listened song (time)"] == "X - T1"
    assert rows["Most listened artist (count)"] == "X"
    assert rows["Friday night song (count)"] == "X - T1"


def test_stats_command_omits_rows_without_result(data_dir):
    runner = CliRunner()
    # User 10 only listened to a song missing from the catalog
    result = runner.invoke(main, ["stats", "--data-dir", str(data_dir), "--user-id", "10"])
    assert result.exit_code == 0, result.output
    assert "Most listened" not in result.output
    assert "Question" in result.output


def test_stats_command_user_without_music(data_dir):
    runner = CliRunner()
    result = runner.invoke(main, ["stats", "--data-dir", str(data_dir), "--user-id", "4"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "No music for this user"


def test_stats_command_unknown_time_zone(data_dir):
    runner = CliRunner()
    result = runner.invoke(
        main, ["stats", "--data-dir", str(data_dir), "--user-id", "1", "--tz", "Mars/Olympus"]
    )
    assert result.exit_code != 0
    assert "Unknown time zone" in result.output


def test_stats_command_zone_name_is_a_directory(data_dir):
    runner = CliRunner()
    # "America" is a folder in the zone database, not a zone
    result = runner.invoke(
        main, ["stats", "--data-dir", str(data_dir), "--user-id", "1", "--tz", "America"]
    )
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Unknown time zone" in result.output


def test_stats_command_reads_log_level_from_environment(data_dir, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    runner = CliRunner()
    result = runner.invoke(main, ["stats", "--data-dir", str(data_dir), "--user-id", "1"])
    assert result.exit_code == 0, result.output
    assert "Most listened song (count)" in result.output


def test_missing_data_dir(tmp_path):
    runner = CliRunner()
    result = runner.invoke(main, ["users", "--data-dir", str(tmp_path / "nope")])
    assert result.exit_code != 0
    assert "Data directory not found" in result.output
