from os import path

import yaml

TESTDATA_DIR = path.join(path.dirname(__file__), 'testdata')


def get_testdata_filename(filename):
    return path.join(TESTDATA_DIR, filename)


def load_testdata_object(filename='svc.yaml'):
    with open(get_testdata_filename(filename), 'r') as f:
        return yaml.safe_load(f)
