import struct
import threading

import pytest

from kuruk.protobuffile import ProtobufFileError, ProtobufFileReader, ProtobufFileSaver


class FakeMessage:
    def __init__(self, payload=b"", initialized=True):
        self.payload = payload
        self.initialized = initialized

    def IsInitialized(self):
        return self.initialized

    def SerializeToString(self):
        return self.payload

    def ParseFromString(self, data):
        self.payload = bytes(data)
        return len(data)


class BrokenMessage:
    def ParseFromString(self, data):
        raise ValueError("bad data")


def test_header_layout(tmp_path):
    path = tmp_path / "log.bin"
    with ProtobufFileSaver(str(path), "AB") as saver:
        assert saver.save_message(b"") is True
    assert path.read_bytes() == (
        b"\x00\x00\x00\x04\x00A\x00B" + b"\x00\x00\x00\x00" + b"\x00\x00\x00\x00"
    )


def test_round_trip(tmp_path):
    path = str(tmp_path / "log.bin")
    payloads = [b"first", b"", b"\x00\x01\x02third"]
    with ProtobufFileSaver(path, "KURUK_LOG") as saver:
        for payload in payloads:
            assert saver.save_message(FakeMessage(payload))

    with ProtobufFileReader() as reader:
        reader.open(path, "KURUK_LOG")
        read = []
        message = FakeMessage()
        while reader.read_next(message):
            read.append(message.payload)
    assert read == payloads


def test_iteration_yields_payloads(tmp_path):
    path = str(tmp_path / "log.bin")
    with ProtobufFileSaver(path, "p") as saver:
        saver.save_message(b"one")
        saver.save_message(bytearray(b"two"))
    reader = ProtobufFileReader()
    reader.open(path, "p")
    assert list(reader) == [b"one", b"two"]
    assert reader.read_next(FakeMessage()) is False
    reader.close()


def test_file_created_lazily(tmp_path):
    path = tmp_path / "lazy.bin"
    saver = ProtobufFileSaver(str(path), "p")
    assert not path.exists()
    saver.save_message(b"x")
    assert path.exists()
    saver.close()


def test_uninitialized_message_skipped(tmp_path):
    path = tmp_path / "skip.bin"
    saver = ProtobufFileSaver(str(path), "p")
    assert saver.save_message(FakeMessage(b"x", initialized=False)) is False
    assert not path.exists()
    saver.close()


def test_wrong_prefix_rejected(tmp_path):
    path = str(tmp_path / "log.bin")
    with ProtobufFileSaver(path, "alpha") as saver:
        saver.save_message(b"x")
    reader = ProtobufFileReader()
    with pytest.raises(ProtobufFileError):
        reader.open(path, "beta")


def test_wrong_version_rejected(tmp_path):
    path = tmp_path / "log.bin"
    prefix = "p".encode("utf-16-be")
    path.write_bytes(struct.pack(">I", len(prefix)) + prefix + struct.pack(">i", 1))
    with pytest.raises(ProtobufFileError):
        ProtobufFileReader().open(str(path), "p")


def test_missing_file_rejected(tmp_path):
    with pytest.raises(ProtobufFileError):
        ProtobufFileReader().open(str(tmp_path / "absent.bin"), "p")


def test_truncated_record_rejected(tmp_path):
    path = tmp_path / "log.bin"
    with ProtobufFileSaver(str(path), "p") as saver:
        saver.save_message(b"abcdef")
    path.write_bytes(path.read_bytes()[:-2])
    reader = ProtobufFileReader()
    reader.open(str(path), "p")
    with pytest.raises(ProtobufFileError):
        reader.read_next(FakeMessage())
    reader.close()


def test_parse_failure_raises(tmp_path):
    path = str(tmp_path / "log.bin")
    with ProtobufFileSaver(path, "p") as saver:
        saver.save_message(b"abc")
    reader = ProtobufFileReader()
    reader.open(path, "p")
    with pytest.raises(ProtobufFileError):
        reader.read_next(BrokenMessage())
    reader.close()


def test_read_without_open_raises():
    with pytest.raises(ProtobufFileError):
        ProtobufFileReader().read_next(FakeMessage())


def test_concurrent_saves(tmp_path):
    path = str(tmp_path / "log.bin")
    saver = ProtobufFileSaver(path, "p")

    def worker(tag):
        for _ in range(50):
            saver.save_message(tag)

    threads = [threading.Thread(target=worker, args=(bytes([i]) * 8,)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    saver.close()

    reader = ProtobufFileReader()
    reader.open(path, "p")
    records = list(reader)
    reader.close()
    assert len(records) == 200
    assert sorted(set(records)) == [bytes([i]) * 8 for i in range(4)]