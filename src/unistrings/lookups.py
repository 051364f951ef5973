import pandas as pd
import yaml
from functools import cached_property
from keyword import iskeyword
from typing import Dict
from unistrings.connections import SettingsDataSource, SubstitutionDataSource

class Settings(SettingsDataSource):
    def __init__(self):
        with self.yaml_path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
            for key, value in data.items():
                if not iskeyword(key):
                    setattr(self, key, value)

class SubstitutionData(SubstitutionDataSource):
    def __init__(self):
        with self.csv_path.open('r', encoding='utf-8') as f:
            data = pd.read_csv(f, dtype=str, keep_default_na=False)
            for column in data.columns:
                if not iskeyword(column):
                    setattr(self, column, data[column])

    def _tier_table(self, tier: str) -> Dict[int, str]:
        in_tier = self.tier == tier
        codepoints = [int(x, 16) for x in self.codepoint[in_tier]]
        return dict(zip(codepoints, self.replacement[in_tier]))

    @cached_property
    def typographic(self) -> Dict[int, str]:
        """Quotes, degree sign, Cyrillic Ya/Yu and German umlauts."""
        return self._tier_table('typographic')

    @cached_property
    def symbols(self) -> Dict[int, str]:
        """Trademark signs, guillemets, currency, superscripts and arrows."""
        return self._tier_table('symbol')
