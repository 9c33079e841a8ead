from unittest import TestCase

from .bufferview import BufferView
from .errors import RangeError, ReadonlyError
from .primitives import Float32, Int8U, Int16S, Int32U


class TestBufferView(TestCase):
    def test_window(self):
        data = bytearray(range(10))
        view = BufferView(data, offset=2, size=4)
        self.assertEqual(view.size, 4)
        self.assertEqual(view.remaining, 4)
        self.assertEqual(view.tobytes(), b'\x02\x03\x04\x05')

    def test_bad_window(self):
        with self.assertRaises(RangeError):
            BufferView(bytearray(4), offset=5)
        with self.assertRaises(RangeError):
            BufferView(bytearray(4), offset=2, size=3)

    def test_read_fixed_advances(self):
        view = BufferView(b'\x01\xfe\xff\x00\x00\x80\x3f')
        self.assertEqual(view.read_fixed(Int8U), Int8U(1))
        self.assertEqual(view.position, 1)
        self.assertEqual(view.read_fixed(Int16S), Int16S(-2))
        self.assertEqual(view.read_fixed(Float32), Float32(1.0))
        self.assertTrue(view.eof())

    def test_big_endian(self):
        view = BufferView(b'\x00\x00\x01\x00', little=False)
        self.assertEqual(view.read_fixed(Int32U), Int32U(256))

    def test_read_past_end(self):
        view = BufferView(b'\x01')
        with self.assertRaises(RangeError):
            view.read_fixed(Int16S)
        self.assertEqual(view.position, 0)

    def test_write_fixed(self):
        data = bytearray(3)
        view = BufferView(data)
        view.write_fixed(Int8U, 7)
        view.write_fixed(Int16S, Int16S(-1))
        self.assertEqual(bytes(data), b'\x07\xff\xff')
        with self.assertRaises(RangeError):
            view.write_fixed(Int8U, 1)

    def test_write_fixed_casts_and_checks(self):
        view = BufferView(bytearray(1))
        with self.assertRaises(RangeError):
            view.write_fixed(Int8U, 256)
        self.assertEqual(view.position, 0)

    def test_readonly(self):
        view = BufferView(b'\x00\x00')
        self.assertTrue(view.readonly)
        with self.assertRaises(ReadonlyError):
            view.write_fixed(Int8U, 1)
        view = BufferView(bytearray(2), readonly=True)
        with self.assertRaises(ReadonlyError):
            view.write_bytes(b'\x01')

    def test_position(self):
        view = BufferView(bytearray(2))
        view.position = 2
        self.assertTrue(view.eof())
        with self.assertRaises(RangeError):
            view.position = 3
        with self.assertRaises(RangeError):
            view.position = -1

    def test_get_fixed(self):
        view = BufferView(b'\x05\x06')
        self.assertEqual(view.get_fixed(Int8U, 1), Int8U(6))
        self.assertEqual(view.position, 0)
        with self.assertRaises(RangeError):
            view.get_fixed(Int8U, 2)

    def test_read_view_shares_bytes(self):
        data = bytearray(4)
        view = BufferView(data)
        view.read_bytes(1)
        sub = view.read_view(2)
        self.assertEqual(view.position, 3)
        sub.write_fixed(Int16S, -1)
        self.assertEqual(bytes(data), b'\x00\xff\xff\x00')

    def test_copy(self):
        data = bytearray(b'\x01\x02')
        view = BufferView(data)
        view.read_bytes(1)
        dup = view.copy()
        self.assertEqual(dup.position, 0)
        dup.write_fixed(Int8U, 9)
        self.assertEqual(bytes(data), b'\x01\x02')
        self.assertEqual(dup.tobytes(), b'\x09\x02')
