import pytest

from hill.__main__ import main


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out.strip(), err.strip()


def test_encrypt(capsys):
    assert run(capsys, 'encrypt', 'help', '-k', '3', '3', '2', '5') == (0, 'hiat', '')


def test_decrypt(capsys):
    assert run(capsys, 'decrypt', 'hiat', '--key', '3', '3', '2', '5') == (0, 'help', '')


def test_padding_kept(capsys):
    code, out, _ = run(capsys, 'encrypt', 'message', '-k', '1', '3', '2', '5')
    assert (code, out) == (0, 'ysuwsevt')
    code, out, _ = run(capsys, 'decrypt', out, '-k', '1', '3', '2', '5')
    assert (code, out) == (0, 'messagex')


def test_upper(capsys):
    assert run(capsys, 'encrypt', 'help', '-k', '3', '3', '2', '5', '--upper')[1] == 'HIAT'


def test_key_count_not_square(capsys):
    code, out, err = run(capsys, 'encrypt', 'help', '-k', '3', '3', '2')
    assert code == 1
    assert out == ''
    assert err.startswith('error: not square')


def test_key_not_invertible(capsys):
    code, _, err = run(capsys, 'decrypt', 'help', '-k', '2', '4', '1', '3')
    assert code == 1
    assert err.startswith('error: not invertible mod 26')


def test_message_not_letters(capsys):
    code, _, err = run(capsys, 'encrypt', 'h3lp', '-k', '3', '3', '2', '5')
    assert code == 1
    assert err.startswith('error: non-alphabetic character')


def test_negative_key_entries(capsys):
    assert run(capsys, 'encrypt', 'help', '-k', '-23', '3', '-24', '5')[:2] == (0, 'hiat')


def test_bad_action():
    with pytest.raises(SystemExit):
        main(['scramble', '-k', '1', 'abc'])
