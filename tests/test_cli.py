import logging

import pytest

from makernotes import cli
from makernotes.tags import FIELD_TYPE_SHORT

from .conftest import build_ifd, shorts


@pytest.fixture
def casio_file(tmp_path):
    path = tmp_path / 'casio.bin'
    path.write_bytes(build_ifd([(0x0014, FIELD_TYPE_SHORT, 1, shorts(64))]))
    return str(path)


def test_prints_tags(casio_file, caplog, clean_logger):
    caplog.set_level(logging.INFO, logger='makernotes')
    cli.main(['-m', 'CASIO', casio_file])
    assert 'CCD Sensitivity (0x0014): Normal' in caplog.text


def test_unknown_make(casio_file, caplog, clean_logger):
    caplog.set_level(logging.INFO, logger='makernotes')
    cli.main(['--make', 'Leica', casio_file])
    assert 'No makernote information found' in caplog.text


def test_strict_unknown_make(casio_file, caplog, clean_logger):
    caplog.set_level(logging.INFO, logger='makernotes')
    cli.main(['-s', '-m', 'Leica', casio_file])
    assert 'No known makernote layout' in caplog.text


def test_unreadable_file(tmp_path, caplog, clean_logger):
    caplog.set_level(logging.INFO, logger='makernotes')
    cli.main([str(tmp_path / 'missing.bin')])
    assert 'is unreadable' in caplog.text


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(['-v'])
    assert exc.value.code == 0
    assert 'Version' in capsys.readouterr().out


@pytest.mark.parametrize('args', [[], ['-x', 'file'], ['-e', 'X', 'file'], ['-o', 'abc', 'file']])
def test_usage(args, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(args)
    assert exc.value.code == 2
    assert 'Usage' in capsys.readouterr().out
