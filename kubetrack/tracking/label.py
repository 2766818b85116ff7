import re

from kubetrack.exceptions import KubeTruncationError

# Kubernetes label values are at most 63 characters
LABEL_MAX_LENGTH = 63

# ...and must begin and end with an alphanumeric character
LABEL_VALID_ENDING = re.compile(r'[a-zA-Z0-9]\Z')


def truncate_label(name, max_length=LABEL_MAX_LENGTH):
    '''
    Cut a name down to something usable as a label value. Characters are
    dropped from the end until the value fits and ends alphanumerically.
    '''

    if len(name) <= max_length:
        return name

    truncated = name[:max_length]
    while truncated:
        if LABEL_VALID_ENDING.search(truncated):
            return truncated
        truncated = truncated[:-1]

    raise KubeTruncationError('unable to truncate label to not end with a special character')
