import unittest

import inicfg

DICTIONARY_INI = """
[kamus]
makan=eat
Minum =  drink
LIHAT   =   see = watch    # double = should OK

  [  STATUS  ]
  web = active
"""


class TestDocument(unittest.TestCase):
    def setUp(self) -> None:
        self.doc = inicfg.load(DICTIONARY_INI)

    def test_read_missing(self) -> None:
        self.assertEqual(self.doc.read("kamus", "tidur"), "")
        self.assertEqual(self.doc.read("nowhere", "makan"), "")

    def test_read_case_insensitive(self) -> None:
        self.assertEqual(self.doc.read("KAMUS", "Minum"), "drink")
        self.assertEqual(
            self.doc.read("Status", "WEB"), self.doc.read("status", "web")
        )

    def test_value_case_preserved(self) -> None:
        doc = inicfg.load("[Setting]\nColor = Dark Red\n")
        self.assertEqual(doc.read("setting", "color"), "Dark Red")
        self.assertEqual(doc.read("Setting", "Color"), "Dark Red")

    def test_section_exists(self) -> None:
        self.assertTrue(self.doc.section_exists("kamus"))
        self.assertTrue(self.doc.section_exists("STATUS"))
        self.assertFalse(self.doc.section_exists("nowhere"))
        self.assertIn("Kamus", self.doc)
        self.assertNotIn("nowhere", self.doc)

    def test_key_exists(self) -> None:
        self.assertTrue(self.doc.key_exists("kamus", "LIHAT"))
        self.assertFalse(self.doc.key_exists("kamus", "tidur"))
        self.assertFalse(self.doc.key_exists("nowhere", "makan"))

    def test_key_exists_with_empty_value(self) -> None:
        doc = inicfg.load("[a]\nblank =\n")
        self.assertEqual(doc.read("a", "blank"), "")
        self.assertTrue(doc.key_exists("a", "blank"))

    def test_section_list(self) -> None:
        self.assertCountEqual(self.doc.section_list(), ["kamus", "status"])

    def test_key_list(self) -> None:
        self.assertCountEqual(
            self.doc.key_list("kamus"), ["makan", "minum", "lihat"]
        )
        self.assertEqual(self.doc.key_list("nowhere"), [])

    def test_empty_section_listed(self) -> None:
        doc = inicfg.load("[empty]\n[full]\nk = v\n")
        self.assertCountEqual(doc.section_list(), ["empty", "full"])
        self.assertEqual(doc.key_list("empty"), [])

    def test_duplicate_key_last_wins(self) -> None:
        doc = inicfg.load("[a]\nk = 1\nK = 2\n")
        self.assertEqual(doc.read("a", "k"), "2")
        self.assertEqual(doc.key_list("a"), ["k"])

    def test_duplicate_section_replaces(self) -> None:
        doc = inicfg.load("[a]\nx = 1\ny = 2\n[b]\n[A]\ny = 3\n")

        self.assertEqual(doc.read("a", "y"), "3")
        self.assertFalse(doc.key_exists("a", "x"))
        self.assertEqual(doc.key_list("a"), ["y"])
        self.assertCountEqual(doc.section_list(), ["a", "b"])

    def test_comments(self) -> None:
        data = (
            "# Test comment\n"
            "[ENGLISH]\n"
            "#satu = one\n"
            "dua = two\n"
            ";tiga = three\n"
            "empat = four ; trailing\n"
        )
        doc = inicfg.load(data)

        self.assertCountEqual(doc.key_list("english"), ["dua", "empat"])
        self.assertEqual(doc.read("english", "dua"), "two")
        self.assertEqual(doc.read("english", "empat"), "four")
        self.assertEqual(doc.read("english", "#satu"), "")

    def test_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.doc.sections["kamus"] = {}  # type: ignore[index]

        with self.assertRaises(TypeError):
            self.doc.section("kamus")["makan"] = "x"  # type: ignore[index]

    def test_as_dict_is_a_copy(self) -> None:
        d = self.doc.as_dict()
        d["kamus"]["makan"] = "devour"

        self.assertEqual(
            d,
            {
                "kamus": {
                    "makan": "devour",
                    "minum": "drink",
                    "lihat": "see = watch",
                },
                "status": {"web": "active"},
            },
        )
        self.assertEqual(self.doc.read("kamus", "makan"), "eat")

    def test_constructor_copies_input(self) -> None:
        sections = {"a": {"k": "v"}}
        doc = inicfg.Document(sections)
        sections["a"]["k"] = "changed"

        self.assertEqual(doc.read("a", "k"), "v")

    def test_constructor_normalizes_names(self) -> None:
        doc = inicfg.Document({" Setting ": {"Color": "Red"}})

        self.assertEqual(doc.read("Setting", "Color"), "Red")
        self.assertEqual(doc.read("setting", "color"), "Red")
        self.assertEqual(doc.section_list(), ["setting"])
        self.assertEqual(doc.key_list("SETTING"), ["color"])

    def test_constructor_rejects_empty_names(self) -> None:
        with self.assertRaises(ValueError):
            inicfg.Document({"  ": {"k": "v"}})

        with self.assertRaises(ValueError):
            inicfg.Document({"a": {"": "v"}})
