# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import sqrt
from typing import Iterable, Iterator, Mapping, Union

from .exceptions import InvalidArgument, InvalidState, NotSupported
from .text_charts import chart_bars


class Histogram:
  '''
  A histogram of integer samples, stored as a contiguous list of bucket counts.
  `base` is the key of `buckets[0]`.

  Writing a key outside of the allocated range grows the list exactly as far as needed;
  the list only shrinks when `trim` is called.
  Reading a key never allocates; keys outside of the allocated range have a count of zero.

  Writes through `set` (or `hist[key] = count`) and `add_sample` are not validated,
  and can leave negative counts behind; only `remove` refuses to take a count below zero.
  `min` and `max` only consider positive buckets, while `is_empty` considers any nonzero bucket.

  A histogram has a single owner and no internal locking;
  it must not be mutated from multiple threads without external synchronization.
  '''

  def __init__(self, samples:Iterable[int]|None=None) -> None:
    self.base = 0
    self.buckets:list[int] = []
    if samples is None: return
    samples = list(samples)
    if not samples: raise InvalidArgument('cannot construct a Histogram from an empty collection of samples')
    self.base = min(samples)
    self.buckets = [0] * (max(samples) - self.base + 1)
    for sample in samples:
      self.buckets[sample - self.base] += 1


  @classmethod
  def with_range(cls, min:int, max:int) -> 'Histogram':
    '''
    Create an empty histogram with buckets allocated for keys `min` through `max`, inclusive.
    Histograms resize themselves as needed; preallocating only avoids repeated growth.
    '''
    if min > max: raise InvalidArgument(f'`min` cannot be greater than `max`: {min} > {max}')
    hist = cls()
    hist.base = min
    hist.buckets = [0] * (max - min + 1)
    return hist


  def __repr__(self) -> str:
    return f'{self.__class__.__name__}(base={self.base}, buckets={self.buckets!r})'


  def copy(self) -> 'Histogram':
    hist = type(self)()
    hist.base = self.base
    hist.buckets = list(self.buckets)
    return hist


  @property
  def min(self) -> int:
    'The smallest key with a positive count.'
    key = self._first_key()
    if key is None: raise InvalidState('histogram has no samples')
    return key


  @property
  def max(self) -> int:
    'The largest key with a positive count.'
    key = self._last_key()
    if key is None: raise InvalidState('histogram has no samples')
    return key


  @property
  def alloc_min(self) -> int:
    'The smallest key in the allocated range.'
    return self.base


  @property
  def alloc_max(self) -> int:
    'The largest key in the allocated range.'
    return self.base + len(self.buckets) - 1


  @property
  def is_empty(self) -> bool:
    return not any(self.buckets)


  def _first_key(self) -> int|None:
    for i, count in enumerate(self.buckets):
      if count > 0: return self.base + i
    return None


  def _last_key(self) -> int|None:
    for i in range(len(self.buckets) - 1, -1, -1):
      if self.buckets[i] > 0: return self.base + i
    return None


  def get(self, key:int) -> int:
    'Return the count for `key`, or zero if `key` is outside of the allocated range.'
    i = key - self.base
    return self.buckets[i] if 0 <= i < len(self.buckets) else 0


  def set(self, key:int, count:int) -> None:
    'Overwrite the count for `key`, growing the allocated range if necessary. `count` is not validated.'
    self._ensure_capacity(key)
    self.buckets[key - self.base] = count


  def __getitem__(self, key:int) -> int:
    return self.get(key)


  def __setitem__(self, key:int, count:int) -> None:
    self.set(key, count)


  def items(self) -> Iterator[tuple[int,int]]:
    'Yield `(key, count)` pairs for every allocated bucket, in key order.'
    return ((self.base + i, count) for i, count in enumerate(self.buckets))


  def add_sample(self, key:int, quantity=1) -> None:
    'Add `quantity` samples of `key`. A negative quantity is applied as is.'
    self._ensure_capacity(key)
    self.buckets[key - self.base] += quantity


  def update(self, samples_or_mapping:Union['Histogram',Iterable[int],Mapping[int,int]]) -> None:
    '''
    Add samples from another histogram, a mapping of keys to quantities, or an iterable of samples.
    '''
    if isinstance(samples_or_mapping, Histogram):
      self.merge(samples_or_mapping)
    elif isinstance(samples_or_mapping, Mapping):
      for key, quantity in samples_or_mapping.items():
        self.add_sample(key, quantity)
    else:
      for key in samples_or_mapping:
        self.add_sample(key)


  def remove(self, key:int, *, resize=False) -> None:
    '''
    Remove a single sample of `key`.
    Removing the last sample of a key leaves the allocated range unchanged; call `trim` to release it.
    Shrinking storage when a removal takes a count to zero (`resize=True`) is not supported,
    and raises before the sample is removed.
    '''
    i = key - self.base
    if i < 0 or i >= len(self.buckets) or self.buckets[i] <= 0:
      raise InvalidState(f'no samples of value {key!r} exist')
    if resize and self.buckets[i] == 1:
      raise NotSupported('resizing on removal is not supported; use `trim` instead')
    self.buckets[i] -= 1


  def merge(self, other:'Histogram') -> None:
    '''
    Add every sample of `other` into this histogram.
    The range is fixed and each key is read before it is written, so merging a histogram into itself doubles it.
    '''
    lo = other.min
    hi = other.max
    self._ensure_capacity(lo)
    self._ensure_capacity(hi)
    for key in range(lo, hi + 1):
      self.buckets[key - self.base] += other.get(key)


  def _ensure_capacity(self, key:int) -> None:
    'Grow the allocated range to include `key`. Growth is exact; new buckets are zero.'
    if key < self.base:
      self.buckets[:0] = [0] * (self.base - key)
      self.base = key
    elif key >= self.base + len(self.buckets):
      self.buckets.extend([0] * (key - self.base + 1 - len(self.buckets)))


  def trim(self) -> None:
    '''
    Shrink the allocated range to exactly the occupied range `[min, max]`.
    An empty histogram is reset to zero buckets with a base of zero.
    '''
    if self.is_empty:
      self.base = 0
      self.buckets = []
      return
    lo = self.min
    hi = self.max
    if lo == self.base and hi == self.alloc_max: return
    self.buckets = self.buckets[lo - self.base:hi - self.base + 1]
    self.base = lo


  # Statistics.

  def sample_count(self) -> int:
    return sum(self.buckets)


  def max_height(self) -> int:
    'The largest count of any single bucket.'
    if not self.buckets: raise InvalidState('histogram has no buckets')
    return max(self.buckets)


  def mean_and_count(self) -> tuple[float,int]:
    'Return the mean and the total number of samples, computed in a single pass.'
    total = 0
    count = 0
    for i, c in enumerate(self.buckets):
      count += c
      total += c * (self.base + i)
    if count == 0: raise InvalidState('cannot compute the mean of a histogram with no samples')
    return total / count, count


  def mean(self) -> float:
    return self.mean_and_count()[0]


  def mean_and_variance(self) -> tuple[float,float]:
    'Return the mean and the population variance.'
    mean, count = self.mean_and_count()
    sum_sq = 0.0
    for i, c in enumerate(self.buckets):
      diff = self.base + i - mean
      sum_sq += c * diff * diff
    return mean, sum_sq / count


  def variance(self) -> float:
    return self.mean_and_variance()[1]


  def mean_and_std_dev(self) -> tuple[float,float]:
    'Return the mean and the population standard deviation.'
    mean, variance = self.mean_and_variance()
    return mean, sqrt(variance)


  def std_dev(self) -> float:
    return self.mean_and_std_dev()[1]


  # Equality.

  def __eq__(self, other:object) -> bool:
    '''
    Histograms are equal if every key of their combined occupied range has the same count.
    Allocated but unoccupied buckets do not matter.
    Two empty histograms are equal; comparing an empty histogram to a nonempty one,
    or comparing a histogram whose counts are all negative, raises `InvalidState`.
    '''
    if not isinstance(other, Histogram): return NotImplemented
    if self.is_empty and other.is_empty: return True
    lo = min(self.min, other.min)
    hi = max(self.max, other.max)
    return all(self.get(key) == other.get(key) for key in range(lo, hi + 1))


  __hash__ = None # type: ignore[assignment] # Mutable.


  def fingerprint(self) -> int:
    '''
    Return a hash of the occupied contents, which is consistent with `__eq__` regardless of allocation.
    The value changes whenever the histogram is mutated, so histograms must not be used as keys by this value.
    '''
    lo = self._first_key()
    if lo is None: return hash(())
    hi = self.max
    return hash((lo, tuple(self.buckets[lo - self.base:hi - self.base + 1])))


  def bar_chart(self, max_width=0, key_fmt='d') -> str:
    '''
    Render a horizontal bar chart with one line per allocated bucket.
    See `tally.text_charts.chart_bars`.
    '''
    return chart_bars(self.items(), max_width=max_width, key_fmt=key_fmt)


  def __iter__(self) -> 'SampleCursor':
    'Iterate over every sample in ascending order; a key with a count of three is yielded three times.'
    return SampleCursor(self)



class SampleCursor(Iterator[int]):
  '''
  An iterator over the samples of a histogram, in ascending key order.

  The cursor holds only its current key and the number of samples of that key already yielded.
  Each call to `advance` reads the live maximum and the live count of the current bucket,
  so the histogram may be mutated between steps and the cursor adapts.
  Advancing while another thread mutates the histogram is not supported.
  '''

  def __init__(self, histogram:Histogram) -> None:
    self.histogram = histogram
    self._key:int|None = None
    self._yielded = 0


  def reset(self) -> None:
    'Return the cursor to its state before the first call to `advance`.'
    self._key = None
    self._yielded = 0


  @property
  def current(self) -> int:
    if self._key is None: raise InvalidState('SampleCursor has not been advanced')
    return self._key


  def advance(self) -> bool:
    'Step to the next sample. Return False if there are no more samples.'
    hist = self.histogram
    if self._key is None:
      first = hist._first_key()
      if first is None: return False
      self._key = first
      self._yielded = 0
      return True
    last = hist._last_key()
    if last is None: return False
    self._yielded += 1
    while self._yielded >= hist.get(self._key):
      if self._key >= last: return False
      self._key += 1
      self._yielded = 0
    return True


  def __next__(self) -> int:
    if not self.advance(): raise StopIteration
    return self.current
