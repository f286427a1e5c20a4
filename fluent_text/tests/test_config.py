import dataclasses
import unittest

from fluent_text.config import DEFAULT_CONFIG, EXTENDED_NAME_PARTICLES, NAME_PARTICLES, TextConfig
from fluent_text.name_case import to_name_case


class TestTextConfig(unittest.TestCase):
    def test_defaults(self):
        config = TextConfig()
        self.assertEqual(config.name_particles, NAME_PARTICLES)
        self.assertFalse(config.strict_roman_numerals)
        self.assertEqual(config.max_result_length, 50_000_000)
        self.assertEqual(config.max_decoded_bytes, 100_000_000)

    def test_from_dict_ignores_unknown_keys(self):
        config = TextConfig.from_dict({"strict_roman_numerals": True, "unknown": 1})
        self.assertTrue(config.strict_roman_numerals)
        self.assertFalse(hasattr(config, "unknown"))

    def test_from_dict_lowercases_particles(self):
        config = TextConfig.from_dict({"name_particles": ["VON", "Der"]})
        self.assertEqual(config.name_particles, ("von", "der"))

    def test_constructor_lowercases_particles(self):
        config = TextConfig(name_particles=["VON", "Der"])
        self.assertEqual(config.name_particles, ("von", "der"))
        self.assertEqual(to_name_case("VON NEUMANN", config), "von Neumann")
        self.assertEqual(to_name_case("ludwig der große", config), "Ludwig der Große")

    def test_to_dict_round_trip(self):
        config = TextConfig(name_particles=["de"], max_result_length=10)
        self.assertEqual(config.to_dict()["name_particles"], ["de"])
        self.assertEqual(TextConfig.from_dict(config.to_dict()), config)

    def test_default_config_cannot_be_changed(self):
        before = to_name_case("ludwig zu berg")
        with self.assertRaises(AttributeError):
            DEFAULT_CONFIG.name_particles.append("zu")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.name_particles = ("zu",)
        self.assertEqual(before, "Ludwig Zu Berg")
        self.assertEqual(to_name_case("ludwig zu berg"), before)
        self.assertEqual(DEFAULT_CONFIG.name_particles, NAME_PARTICLES)

    def test_particle_list_is_copied(self):
        particles = ["zu"]
        config = TextConfig(name_particles=particles)
        particles.append("von")
        self.assertEqual(config.name_particles, ("zu",))

    def test_extended_particles(self):
        config = TextConfig(name_particles=EXTENDED_NAME_PARTICLES)
        self.assertEqual(to_name_case("ludwig der große"), "Ludwig Der Große")
        self.assertEqual(to_name_case("ludwig der große", config), "Ludwig der Große")
        self.assertEqual(to_name_case("joão dos santos", config), "João dos Santos")

    def test_strict_roman_numerals(self):
        config = TextConfig(strict_roman_numerals=True)
        self.assertEqual(to_name_case("did"), "DID")
        self.assertEqual(to_name_case("did", config), "Did")
        self.assertEqual(to_name_case("louis xiv", config), "Louis XIV")


if __name__ == "__main__":
    unittest.main()
