# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
tally is a dynamically resizable histogram of integer samples.
'''

from .exceptions import HistogramError, InvalidArgument, InvalidState, NotSupported
from .histogram import Histogram, SampleCursor
from .stats import HistogramStats, histogram_stats
