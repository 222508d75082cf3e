import enum
from collections import namedtuple

__all__ = ['DEFAULT_LOGGER_NAME', 'LOG_FILE_NAME', 'METHODS_TO_LOG', 'LOG_MODES', 'TreeConf', 'MergeStrategy']

DEFAULT_LOGGER_NAME = 'avlmerge'

# file used by the log wrapper in 'local' mode
LOG_FILE_NAME = 'avlmerge.log'

LOG_MODES = ('local', 'tcp', 'udp')

METHODS_TO_LOG = (
    'insert',
    'insert_many',
    'flatten',
    'min',
    'max'
)

TreeConf = namedtuple('TreeConf', [
    'validate',  # check that bulk-build input is strictly ascending
    'counter',  # ComparisonCounter shared by measured operations, or None
])


class MergeStrategy(enum.Enum):
    # flatten both trees, concatenate and rebuild: O(m + n)
    DISJOINT = 0
    # flatten the smaller tree and insert its keys into the larger: O(m log(m + n))
    REINSERT = 1
