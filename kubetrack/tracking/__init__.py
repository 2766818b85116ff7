from .label import LABEL_MAX_LENGTH, truncate_label  # noqa: F401
from .method import (  # noqa: F401
    get_tracking_method,
    is_old_tracking_method,
    TRACKING_METHOD_NAMES,
    TrackingMethod,
)
from .resource_tracking import is_normalize_exempt, ResourceTracking  # noqa: F401
from .value import (  # noqa: F401
    AppInstanceValue,
    format_app_instance_value,
    parse_app_instance_value,
)
