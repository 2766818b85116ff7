class KubeError(Exception):
    type = 'generic'


# Config errors
#

class KubeConfigError(KubeError):
    type = 'config'


class KubeCLIError(KubeError):
    type = 'cli'


# Object errors
#

class KubeObjectError(KubeError):
    type = 'object'


# Tracking errors
#

class KubeTrackingError(KubeError):
    type = 'tracking'


class KubeWrongTrackingFormatError(KubeTrackingError):
    pass


class KubeTruncationError(KubeTrackingError):
    pass


class KubeTrackingMethodError(KubeTrackingError):
    pass
