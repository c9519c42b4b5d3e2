# SafeCall database models
# Import all models here for SQLAlchemy discovery

from safecall.models.user import User          # noqa
from safecall.models.vehicle import Vehicle    # noqa
from safecall.models.call_log import CallLog   # noqa
