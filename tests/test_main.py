import csv

from langton_ca.main import main


def test_cli_run_without_exports(tmp_path, capsys):
    code = main(['--steps', '20', '--rate', '120', '--no-csv', '--no-snapshot',
                 '--quiet', '--seed', '3', '--out-dir', str(tmp_path)])
    assert code == 0
    assert list(tmp_path.iterdir()) == []
    assert capsys.readouterr().out == ""


def test_cli_writes_csv_and_report(tmp_path, capsys):
    code = main(['--steps', '6', '--rate', '180', '--agents', '2', '--no-snapshot',
                 '--seed', '1', '--out-dir', str(tmp_path)])
    assert code == 0
    with open(tmp_path / 'simulation_log.csv', newline='') as f:
        rows = list(csv.DictReader(f))
    # two frames of three ticks each
    assert sorted({row['step'] for row in rows}) == ['3', '6']
    out = capsys.readouterr().out
    assert "LANGTON'S ANT SIMULATION REPORT" in out
    assert "Total Steps:           6" in out


def test_cli_reports_degraded_placement(tmp_path, capsys):
    config = tmp_path / 'tight.yaml'
    config.write_text("reset:\n  agent_count: 5\n  strategy: scattered\n"
                      "placement:\n  scatter_radius: 0\n")
    code = main(['--config', str(config), '--steps', '1', '--no-csv', '--no-snapshot',
                 '--quiet', '--out-dir', str(tmp_path)])
    assert code == 0
    assert "placed 1 of 5 agents" in capsys.readouterr().err


def test_cli_missing_config(tmp_path, capsys):
    assert main(['--config', str(tmp_path / 'nope.yaml')]) == 1
    assert "not found" in capsys.readouterr().err


def test_cli_bad_config(tmp_path, capsys):
    config = tmp_path / 'bad.yaml'
    config.write_text("reset:\n  max_agents: -3\n")
    assert main(['--config', str(config)]) == 1
    assert "max_agents" in capsys.readouterr().err


def test_cli_rejects_negative_cap_override(tmp_path, capsys):
    assert main(['--max-agents', '-1', '--out-dir', str(tmp_path)]) == 1
