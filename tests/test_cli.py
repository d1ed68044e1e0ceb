import sys
from io import BytesIO, TextIOWrapper

import pytest

from ladder448.cli.__main__ import main
from ladder448.cli.args import argparse

from test_dh import ALICE_PK, ALICE_SK, BOB_PK, BOB_SK, SHARED


def test_argparser(capsys):
  sys.argv = "ladder448 shared secret public".split()
  a = argparse()
  assert a.mode == 'shared'
  assert a.files == ['secret', 'public']
  assert not a.debug
  # Should produce no output
  cap = capsys.readouterr()
  assert not cap.out
  assert not cap.err

  sys.argv = "ladder448 bench -n 5 --debug".split()
  a = argparse()
  assert a.mode == 'bench'
  assert a.rounds == '5'
  assert a.debug is True

  # Stdin marker is positional
  sys.argv = "ladder448 pub -".split()
  a = argparse()
  assert a.files == ['-']

  # Missing argument parameter
  sys.argv = "ladder448 bench -n".split()
  with pytest.raises(SystemExit):
    argparse()
  cap = capsys.readouterr()
  assert not cap.out
  assert "Argument parameter missing: ladder448 bench -n …" in cap.err

  # Flags of other commands are not accepted
  sys.argv = "ladder448 pub -n 5 secret".split()
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 1
  cap = capsys.readouterr()
  assert "Unknown argument: ladder448 pub -n" in cap.err

  # For double-hyphen file separator (to not parse anything after as args)
  sys.argv = "ladder448 pub -- --help".split()
  a = argparse()
  assert a.files == ["--help"]


## End-to-End testing: Running ladder448 as if it was ran from command line

# A fixture to run ladder448 more easily, checks exitcode and returns its output
@pytest.fixture
def ladder(monkeypatch, capsys):
  def run_main(*args, stdin="", exitcode=0):
    sys.argv = [str(arg) for arg in ("ladder448", *args)]
    monkeypatch.setattr("sys.stdin", TextIOWrapper(BytesIO(stdin.encode())))  # Inject stdin
    with pytest.raises(SystemExit) as exc:
      main()
    assert exc.value.code == exitcode, f"Was expecting {exitcode=} but ladder448 did sys.exit({exc.value.code})"
    return capsys.readouterr()
  return run_main


def test_end_to_end(ladder):
  cap = ladder("pub", ALICE_SK)
  assert cap.out.strip() == ALICE_PK

  cap = ladder("shared", BOB_SK, ALICE_PK)
  assert cap.out.strip() == SHARED

  # Keys from stdin
  cap = ladder("pub", "-", stdin=f"{BOB_SK}\n")
  assert cap.out.strip() == BOB_PK

  cap = ladder("shared", ALICE_SK, "-", stdin=BOB_PK)
  assert cap.out.strip() == SHARED


def test_errors(ladder):
  cap = ladder("shared", ALICE_SK, 112 * "0", exitcode=10)
  assert not cap.out
  assert "Error: Invalid public key provided (low order point)" in cap.err

  cap = ladder("pub", "abcd", exitcode=10)
  assert "should be 112 hex digits" in cap.err

  cap = ladder("pub", "not hex at all", exitcode=10)
  assert "hex expected" in cap.err

  cap = ladder("pub", exitcode=10)
  assert "1 key should be specified" in cap.err

  cap = ladder("shared", "-", "-", exitcode=10)
  assert "only one key can be read from stdin" in cap.err

  cap = ladder("foo", exitcode=1)
  assert "Invalid or missing command" in cap.err

  # With --debug the exception is not caught
  sys.argv = ["ladder448", "pub", "abcd", "--debug"]
  with pytest.raises(ValueError):
    main()


def test_help(ladder):
  cap = ladder(exitcode=0)
  assert "ladder448" in cap.out

  cap = ladder("help", "shared")
  assert "low order" in cap.out

  cap = ladder("bench", "--help")
  assert "--rounds" in cap.out

  cap = ladder("--version")
  assert cap.out.startswith("Ladder448 ")


def test_bench(ladder):
  cap = ladder("bench", "-n", 2)
  assert "fixed base" in cap.out
  assert "variable base" in cap.out
  assert "Ran 2 multiplications" in cap.out

  cap = ladder("bench", "-n", "many", exitcode=10)
  assert "Invalid number of rounds" in cap.err
