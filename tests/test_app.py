import pytest

from threehalves.app import benchmark, main, rho_sweep
from threehalves.exceptions import OptionTypeError


def test_benchmark_without_sizes_writes_header_only(tmp_path):
    target = tmp_path / "benchmark.csv"
    assert benchmark(target, sizes=[]) == []
    assert target.read_text() == "#,simulations,time_usage,result,std_err\n"


def test_benchmark_creates_missing_directory(tmp_path):
    target = tmp_path / "nested" / "out.csv"
    benchmark(target, sizes=[])
    assert target.exists()


def test_benchmark_rejects_zero_simulations(tmp_path, capsys):
    with pytest.raises(ValueError):
        benchmark(tmp_path / "b.csv", simulations=0)
    out = capsys.readouterr().out
    assert "building..." in out
    assert "Case : 0 sims" in out


def test_rho_sweep_bad_knock_raises_after_header(tmp_path):
    with pytest.raises(OptionTypeError):
        rho_sweep(tmp_path, "PUT", "UP", "SIDEWAYS", "0.8dt7.2T", 1)
    target = tmp_path / "BPUTrhoUPSIDEWAYS0.8dt7.2T.csv"
    assert target.read_text() == "#,simulations,time_usage,result,std_err,rho\n"


def test_rho_sweep_file_name_uses_suffix(tmp_path):
    with pytest.raises(ValueError):
        rho_sweep(tmp_path, "PUT", "DOWN", "OUT", "0.8dt7.2T1.5B", 0)
    assert (tmp_path / "BPUTrhoDOWNOUT0.8dt7.2T1.5B.csv").exists()


def test_main_benchmark_with_no_sizes(tmp_path):
    target = tmp_path / "m.csv"
    assert main(["benchmark", "--csv", str(target), "--sizes"]) == 0
    assert target.read_text().startswith("#,simulations")


def test_main_rejects_unknown_command():
    with pytest.raises(SystemExit) as info:
        main(["bogus"])
    assert info.value.code == 2


def test_main_rejects_unknown_knock(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["sweep", "--dir", str(tmp_path), "--knock", "SIDEWAYS"])
    assert info.value.code == 2
    assert list(tmp_path.iterdir()) == []