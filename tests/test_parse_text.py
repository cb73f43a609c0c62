import datetime as dt
import enum
import unittest
import uuid

from optionpy import parse, some, none, DateTimeStyle, INVARIANT


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Perm(enum.Flag):
    READ = 1
    WRITE = 2


UTC = dt.timezone.utc


class TestScalars(unittest.TestCase):
    def test_bool(self):
        self.assertEqual(parse.to_bool("true"), some(True))
        self.assertEqual(parse.to_bool(" FALSE "), some(False))
        self.assertEqual(parse.to_bool("yes"), none())
        self.assertEqual(parse.to_bool("1"), none())

    def test_char(self):
        self.assertEqual(parse.to_char("x"), some("x"))
        self.assertEqual(parse.to_char(""), none())
        self.assertEqual(parse.to_char("xy"), none())

    def test_uuid(self):
        u = uuid.UUID("12345678-1234-5678-1234-567812345678")
        self.assertEqual(parse.to_uuid("12345678-1234-5678-1234-567812345678"), some(u))
        self.assertEqual(parse.to_uuid("12345678123456781234567812345678"), some(u))
        self.assertEqual(parse.to_uuid("{12345678-1234-5678-1234-567812345678}"), some(u))
        self.assertEqual(parse.to_uuid("(12345678-1234-5678-1234-567812345678)"), some(u))
        self.assertEqual(
            parse.to_uuid("{0x12345678,0x1234,0x5678,{0x12,0x34,0x56,0x78,0x12,0x34,0x56,0x78}}"), some(u)
        )
        self.assertEqual(
            parse.to_uuid("{0x1,0x2,0x3,{0x4,0x5,0x6,0x7,0x8,0x9,0xa,0xb}}"),
            some(uuid.UUID("00000001-0002-0003-0405-060708090a0b")),
        )
        self.assertEqual(parse.to_uuid("{0x12345678,0x1234,0x5678,{0x12,0x34}}"), none())
        self.assertEqual(parse.to_uuid("{12345678-1234-5678-1234-567812345678)"), none())
        self.assertEqual(parse.to_uuid("urn:uuid:12345678-1234-5678-1234-567812345678"), none())
        self.assertEqual(parse.to_uuid("not-a-uuid"), none())

    def test_enum(self):
        self.assertEqual(parse.to_enum("RED", Color), some(Color.RED))
        self.assertEqual(parse.to_enum("red", Color), none())
        self.assertEqual(parse.to_enum("red", Color, ignore_case=True), some(Color.RED))
        self.assertEqual(parse.to_enum("2", Color), some(Color.GREEN))
        self.assertEqual(parse.to_enum("7", Color), none())
        self.assertEqual(parse.to_enum("", Color), none())
        self.assertEqual(parse.to_enum("READ, WRITE", Perm), some(Perm.READ | Perm.WRITE))
        self.assertEqual(parse.to_enum("3", Perm), some(Perm.READ | Perm.WRITE))
        self.assertEqual(parse.to_enum("READ,EXEC", Perm), none())

    def test_enum_requires_enum_type(self):
        with self.assertRaises(TypeError):
            parse.to_enum("x", int)  # type: ignore[arg-type]


class TestDates(unittest.TestCase):
    def test_iso(self):
        self.assertEqual(parse.to_datetime("2024-03-05T06:07:08"), some(dt.datetime(2024, 3, 5, 6, 7, 8)))
        self.assertEqual(parse.to_datetime(" 2024-03-05 "), some(dt.datetime(2024, 3, 5)))
        self.assertEqual(parse.to_datetime("2024-02-30"), none())
        self.assertEqual(parse.to_datetime("yesterday"), none())

    def test_locale_formats(self):
        self.assertEqual(parse.to_datetime("03/05/2024"), some(dt.datetime(2024, 3, 5)))
        dmy = INVARIANT.with_(date_formats=("%d.%m.%Y",))
        self.assertEqual(parse.to_datetime("05.03.2024", dmy), some(dt.datetime(2024, 3, 5)))
        self.assertEqual(parse.to_datetime("03/05/2024", dmy), none())

    def test_whitespace_styles(self):
        self.assertEqual(parse.to_datetime(" 2024-03-05", styles=DateTimeStyle.NONE), none())
        self.assertEqual(
            parse.to_datetime(" 2024-03-05", styles=DateTimeStyle.ALLOW_LEADING_WHITE),
            some(dt.datetime(2024, 3, 5)),
        )

    def test_zone_styles(self):
        got = parse.to_datetime("2024-03-05T10:00", styles=DateTimeStyle.ASSUME_UNIVERSAL)
        self.assertEqual(got, some(dt.datetime(2024, 3, 5, 10, tzinfo=UTC)))
        got = parse.to_datetime("2024-03-05T10:00+02:00", styles=DateTimeStyle.ADJUST_TO_UNIVERSAL)
        self.assertEqual(got.value.utcoffset(), dt.timedelta(0))  # type: ignore[attr-defined]
        self.assertEqual(got.value.hour, 8)  # type: ignore[attr-defined]
        with self.assertRaises(ValueError):
            parse.to_datetime("2024-03-05", styles=DateTimeStyle.ASSUME_LOCAL | DateTimeStyle.ASSUME_UNIVERSAL)

    def test_exact(self):
        self.assertEqual(parse.to_datetime_exact("2024|03|05", "%Y|%m|%d"), some(dt.datetime(2024, 3, 5)))
        self.assertEqual(parse.to_datetime_exact("2024-03-05", "%Y|%m|%d"), none())
        self.assertEqual(
            parse.to_datetime_exact("05/03/2024", ["%Y|%m|%d", "%d/%m/%Y"]),
            some(dt.datetime(2024, 3, 5)),
        )
        with self.assertRaises(ValueError):
            parse.to_datetime_exact("2024", [])

    def test_offset(self):
        got = parse.to_datetime_offset("2024-03-05T10:00:00+05:30")
        self.assertEqual(got.value.utcoffset(), dt.timedelta(hours=5, minutes=30))  # type: ignore[attr-defined]
        got = parse.to_datetime_offset("2024-03-05T10:00:00", styles=DateTimeStyle.ASSUME_UNIVERSAL)
        self.assertEqual(got, some(dt.datetime(2024, 3, 5, 10, tzinfo=UTC)))
        naive = parse.to_datetime_offset("2024-03-05T10:00:00")
        self.assertIsNotNone(naive.value.tzinfo)  # type: ignore[attr-defined]
        exact = parse.to_datetime_offset_exact("2024-03-05 10:00 +0100", "%Y-%m-%d %H:%M %z")
        self.assertEqual(exact.value.utcoffset(), dt.timedelta(hours=1))  # type: ignore[attr-defined]


class TestTimedelta(unittest.TestCase):
    def test_grammar(self):
        self.assertEqual(parse.to_timedelta("01:02"), some(dt.timedelta(hours=1, minutes=2)))
        self.assertEqual(parse.to_timedelta("01:02:03"), some(dt.timedelta(hours=1, minutes=2, seconds=3)))
        self.assertEqual(parse.to_timedelta("3.04:05:06"), some(dt.timedelta(days=3, hours=4, minutes=5, seconds=6)))
        self.assertEqual(parse.to_timedelta("00:00:01.5"), some(dt.timedelta(seconds=1, microseconds=500000)))
        self.assertEqual(parse.to_timedelta("00:00:00.0000010"), some(dt.timedelta(microseconds=1)))
        self.assertEqual(parse.to_timedelta("-01:00"), some(dt.timedelta(hours=-1)))
        self.assertEqual(parse.to_timedelta("5"), some(dt.timedelta(days=5)))

    def test_rejects(self):
        self.assertEqual(parse.to_timedelta("24:00"), none())
        self.assertEqual(parse.to_timedelta("01:60"), none())
        self.assertEqual(parse.to_timedelta("1:2:3:4"), none())
        self.assertEqual(parse.to_timedelta("00:00:00.12345678"), none())
        self.assertEqual(parse.to_timedelta("abc"), none())
        self.assertEqual(parse.to_timedelta("999999999999"), none())
