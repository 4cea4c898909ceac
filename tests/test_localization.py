import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms.muscle_groups import MUSCLE_GROUPS
from localization import Translator


class TranslatorTestCase(unittest.TestCase):
    def test_english_is_identity(self) -> None:
        tr = Translator()
        self.assertEqual(tr.gettext("Add sets at the same weight"), "Add sets at the same weight")

    def test_dutch(self) -> None:
        tr = Translator("nl")
        self.assertEqual(tr.gettext("Add sets at the same weight"), "Verhoog sets met zelfde gewicht")
        self.assertEqual(tr.gettext("chest"), "borst")

    def test_unknown_key_and_language_fall_back(self) -> None:
        self.assertEqual(Translator("nl").gettext("Unknown message"), "Unknown message")
        self.assertEqual(Translator("fr").gettext("chest"), "chest")

    def test_set_language(self) -> None:
        tr = Translator()
        tr.set_language("nl")
        self.assertEqual(tr.gettext("back"), "rug")

    def test_every_muscle_group_translated(self) -> None:
        dutch = Translator("nl").translations["nl"]
        for group in MUSCLE_GROUPS:
            self.assertIn(group, dutch)

    def test_placeholders_survive_translation(self) -> None:
        dutch = Translator("nl").translations["nl"]
        for key, value in dutch.items():
            for name in ("{count}", "{weeks}", "{weight}", "{name}", "{group}", "{tier}"):
                self.assertEqual(name in key, name in value, key)


if __name__ == "__main__":
    unittest.main()
