from makernotes.decrypt import decrypt_ints, get_decrypted_int_array
from makernotes.directory import Directory
from makernotes.tags.makernote import nikon

HEADER = [0x30, 0x32, 0x30, 0x31]


def test_missing_input():
    assert decrypt_ints(None, 1, 1) is None
    assert decrypt_ints([0] * 8, None, 1) is None
    assert decrypt_ints([0] * 8, 1, None) is None


def test_known_keystream():
    assert decrypt_ints([0] * 6, 0, 0) == [0, 0, 0, 0, 0x07, 0x28]


def test_header_left_alone():
    data = HEADER + [0x55] * 12
    decrypted = decrypt_ints(data, 1234, 5678)
    assert decrypted[:4] == HEADER
    assert decrypted[4:] != data[4:]


def test_input_not_modified():
    data = HEADER + [1, 2, 3, 4]
    decrypt_ints(data, 1, 2)
    assert data == HEADER + [1, 2, 3, 4]


def test_deterministic_and_symmetric():
    data = HEADER + list(range(40))
    once = decrypt_ints(data, 4001234, 1521)
    assert once == decrypt_ints(data, 4001234, 1521)
    assert decrypt_ints(once, 4001234, 1521) == data


def test_wrong_key_gives_other_plaintext():
    data = HEADER + list(range(40))
    assert decrypt_ints(data, 4001234, 1521) != decrypt_ints(data, 4001235, 1521)
    assert decrypt_ints(data, 4001234, 1521) != decrypt_ints(data, 4001234, 1522)


def test_get_decrypted_int_array():
    plain = HEADER + [10, 20, 30]
    directory = Directory.for_format(nikon.TYPE2)
    directory.set_byte_array(nikon.LENS_DATA, bytes(decrypt_ints(plain, 12, 34)))
    assert get_decrypted_int_array(directory, nikon.LENS_DATA) is None
    directory.set_string_bytes(0x001D, b'12')
    directory.set_int(0x00A7, 34)
    assert get_decrypted_int_array(directory, nikon.LENS_DATA) == plain


def test_expand_lens_data():
    plain = HEADER + [0] * 6 + [80, 0, 0]
    directory = Directory.for_format(nikon.TYPE2)
    directory.set_byte_array(nikon.LENS_DATA, bytes(decrypt_ints(plain, 7, 9)))
    directory.set_string_bytes(0x001D, b'7')
    directory.set_int(0x00A7, 9)
    nikon.expand_lens_data(directory)
    assert directory.get_int(nikon.LENS_DATA_OFFSET) == 0x30
    assert directory.get_int(nikon.LENS_FOCUS_DISTANCE) == 80
    assert directory.get_description(nikon.LENS_FOCUS_DISTANCE) == '1.00m'
