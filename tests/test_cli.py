from fsrand.cli import main
from fsrand.diagnostics import sample_bits
from fsrand.generator import Generator


def test_default_histogram(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "out of 100000 sampled random values are shown here." in out
    assert out.splitlines()[0] == "-" * 160


def test_bits_mode(capsys):
    assert main(["bits", "--count", "3", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "3 sample values as bits:"
    assert lines[1:4] == sample_bits(Generator(1), 3)


def test_values_mode(capsys):
    assert main(["values", "--count", "4", "--seed", "6"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "4 sample values:"
    raw = Generator(6)
    assert [int(line) % (1 << 64) for line in lines[1:5]] == [raw.next_u64() for _ in range(4)]


def test_specific_mode(capsys):
    assert main(["specific", "--count", "5"]) == 0
    values = [float(v) for v in capsys.readouterr().out.split()]
    assert len(values) == 5
    assert all(v >= 0.0 for v in values)


def test_all_mode(capsys):
    assert main(["all", "--count", "2"]) == 0
    out = capsys.readouterr().out
    assert "Poisson integer with mean 1: " in out
    assert out.count(": ") >= 42


def test_uniform_mode(capsys):
    assert main(["uniform", "--count", "1000"]) == 0
    out = capsys.readouterr().out
    assert "SD of outcomes: " in out
    assert "SD of differences: " in out


def test_invalid_histogram_reports_error(capsys):
    assert main(["histogram", "--bars", "0"]) == 1
    captured = capsys.readouterr()
    assert "number of bars" in captured.err
    assert captured.out == ""


def test_histogram_out_of_range(capsys):
    assert main(["histogram", "--count", "100", "--low", "1000", "--high", "2000"]) == 1
    assert "No data" in capsys.readouterr().err