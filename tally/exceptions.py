# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised by tally histograms.
Each kind also subclasses the closest builtin, so callers can catch either.
'''


class HistogramError(Exception):
  'Base class for all histogram errors.'


class InvalidArgument(HistogramError, ValueError):
  'Raised when a histogram is constructed from malformed input.'


class InvalidState(HistogramError, ValueError):
  '''
  Raised when an operation is not valid for the current contents of the histogram,
  e.g. removing a sample that is not present, or asking for the minimum of an empty histogram.
  '''


class NotSupported(HistogramError, NotImplementedError):
  'Raised when an option is requested that the histogram deliberately does not implement.'
