from importlib import resources
from functools import cache

@cache
def settings_path():
    """ Package defaults """
    return resources.files('unistrings.data').joinpath('settings.yaml')

@cache
def substitutions_path():
    """ Fixed character replacements applied before transliteration """
    return resources.files('unistrings.data').joinpath('ascii_substitutions.csv')

class SettingsDataSource:
    @property
    def yaml_path(self):
        return settings_path()

class SubstitutionDataSource:
    @property
    def csv_path(self):
        return substitutions_path()
