# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import sqrt
from operator import eq, getitem

from tally.exceptions import InvalidArgument, InvalidState, NotSupported
from tally.histogram import Histogram
from utest import utest, utest_exc, utest_seq, utest_symmetric, utest_val, utest_val_ne


def bounds(h:Histogram) -> tuple[int,int,int,int]:
  return (h.min, h.max, h.alloc_min, h.alloc_max)

def alloc(h:Histogram) -> tuple[int,int]:
  return (h.alloc_min, h.alloc_max)

def counts(h:Histogram, keys:list[int]) -> list[int]:
  return [h[k] for k in keys]


# Adding and removing.

h = Histogram()
h.add_sample(-1)
utest((-1, -1, -1, -1), bounds, h)
h.add_sample(1)
utest((-1, 1, -1, 1), bounds, h)
h.remove(-1)
utest((1, 1, -1, 1), bounds, h)

h = Histogram()
h.add_sample(5) # Growth above an empty buffer starts from the base of zero.
utest((5, 5, 0, 5), bounds, h)

h = Histogram([2])
h.add_sample(2, 3)
utest(4, getitem, h, 2)
h.add_sample(2, -6)
utest(-2, getitem, h, 2)


# Construction.

h = Histogram.with_range(-5, 10)
utest((-5, 10), alloc, h)
for s in [-1, 3, 3, 5]: h.add_sample(s)
utest((-1, 5, -5, 10), bounds, h)

utest((-1, 5, -1, 5), bounds, Histogram([-1, 3, 3, 5]))
utest((7, 7, 7, 7), bounds, Histogram(iter([7])))
utest((0, -1), alloc, Histogram())

utest_exc(InvalidArgument, Histogram, [])
utest_exc(InvalidArgument, Histogram.with_range, 3, 2)
utest_exc(ValueError, Histogram.with_range, 3, 2)
utest((3, 3), alloc, Histogram.with_range(3, 3))


# Indexing.

keys = [-1000, -2, -1, 0, 1, 2, 3, 1000]
h = Histogram([-1, 1, 1, 2])
utest_seq([0, 0, 1, 0, 2, 1, 0, 0], counts, h, keys)
utest((-1, 2), alloc, h) # Reads never grow storage.

h[1] -= 1
utest_seq([0, 0, 1, 0, 1, 1, 0, 0], counts, h, keys)

h[0] = 5
utest_seq([0, 0, 1, 5, 1, 1, 0, 0], counts, h, keys)

h.set(4, 2)
utest(2, h.get, 4)
utest((-1, 4), alloc, h)


# Negative counts are only reachable through direct writes; they are not empty, but have no min or max.

h = Histogram([3])
h[3] = -2
utest(False, getattr, h, 'is_empty')
utest_exc(InvalidState, getattr, h, 'min')
utest_exc(InvalidState, getattr, h, 'max')
utest(-2, h.sample_count)

h = Histogram.with_range(0, 3)
utest(True, getattr, h, 'is_empty')
utest_exc(InvalidState, getattr, h, 'min')
utest_exc(InvalidState, getattr, Histogram(), 'max')


# Removal errors leave the histogram unchanged.

h = Histogram([1, 3])
utest_exc(InvalidState, h.remove, 7)
utest_exc(InvalidState, h.remove, -7)
utest_exc(InvalidState, h.remove, 2)
utest_exc(NotSupported, h.remove, 1, resize=True)
utest_exc(NotImplementedError, h.remove, 3, resize=True)
utest_exc(InvalidState, h.remove, 9, resize=True) # Absent keys are reported as such.
utest_exc(InvalidState, h.remove, 2, resize=True)
utest_seq([1, 0, 1], counts, h, [1, 2, 3])

h = Histogram([3, 3])
h.remove(3, resize=True) # The count stays positive, so nothing would be resized.
utest_seq([1], counts, h, [3])
utest_exc(NotSupported, h.remove, 3, resize=True)
utest_seq([1], counts, h, [3])

h = Histogram([1, 3])
h[1] = -1
utest_exc(InvalidState, h.remove, 1)
utest(-1, getitem, h, 1)


# Merging.

a = Histogram([-1, 2, 2])
a.merge(Histogram([-5, -1, 2]))
utest_seq([1, 0, 2, 3, 0], counts, a, [-5, -2, -1, 2, 3])

a = Histogram([-1, 2, 2])
a.merge(Histogram([-1, 2, 5]))
utest_seq([0, 2, 3, 0, 1], counts, a, [-2, -1, 2, 3, 5])

a = Histogram([-1, 2, 2])
a.merge(a)
utest_seq([0, 2, 4, 0], counts, a, [-2, -1, 2, 3])

a = Histogram()
a.merge(Histogram([3, 4]))
utest_seq([1, 1], counts, a, [3, 4])
utest((0, 4), alloc, a)

utest_exc(InvalidState, Histogram([1]).merge, Histogram())

def merged(a_samples:list[int], b_samples:list[int]) -> Histogram:
  a = Histogram(a_samples)
  a.merge(Histogram(b_samples))
  return a

utest_symmetric(utest, Histogram([-5, -1, -1, 2, 2, 2]), merged, [-1, 2, 2], [-5, -1, 2])
utest_symmetric(utest, Histogram([0, 0, 9]), merged, [0], [0, 9])


# Updating from samples, mappings and histograms.

h = Histogram()
h.update([4, 4, 6])
h.update({4: 1, -2: 3})
utest_seq([3, 3, 0, 1], counts, h, [-2, 4, 5, 6])
h.update(h)
utest_seq([6, 6, 0, 2], counts, h, [-2, 4, 5, 6])


# Trimming.

h = Histogram()
h.trim()
utest('Histogram(base=0, buckets=[])', repr, h)

h = Histogram([-1, 2, 2])
h.remove(-1)
utest((-1, 2), alloc, h)
h.trim()
utest((2, 2), alloc, h)

h = Histogram([-1, -1, 2])
h.remove(2)
utest((-1, 2), alloc, h)
h.trim()
utest((-1, -1), alloc, h)
h.trim()
utest('Histogram(base=-1, buckets=[2])', repr, h)

h = Histogram.with_range(-10, 10)
h.update([-3, 0, 4])
h.trim()
utest((-3, 4), alloc, h)
utest_seq([1, 0, 0, 1, 0, 0, 0, 1], counts, h, list(range(-3, 5)))

h = Histogram([4])
h.remove(4)
utest((4, 4), alloc, h) # Removing the last sample does not release the bucket.
h.trim()
utest('Histogram(base=0, buckets=[])', repr, h)
utest((0, -1), alloc, h)


# Statistics.

h = Histogram([-1, 1])
utest(0, h.mean)
utest(1, h.std_dev)
utest(2, h.sample_count)
utest(1, h.max_height)

h = Histogram([1, 2, 4, 5])
utest(3, h.mean)
utest(sqrt(2.5), h.std_dev)
utest(2.5, h.variance)
utest(4, h.sample_count)
utest(1, h.max_height)
utest((3.0, 4), h.mean_and_count)
utest((3.0, sqrt(2.5)), h.mean_and_std_dev)

h = Histogram([1, 2, 5, 5, 5])
utest(18 / 5, h.mean)
utest(5, h.sample_count)
utest(3, h.max_height)

utest_exc(InvalidState, Histogram().mean)
utest_exc(InvalidState, Histogram().std_dev)
utest_exc(InvalidState, Histogram.with_range(0, 2).mean_and_count)
utest_exc(InvalidState, Histogram().max_height)
utest(0, Histogram().sample_count)
utest(0, Histogram.with_range(0, 2).max_height)


# Equality.

utest(False, eq, Histogram([-1, 2, 2]), Histogram([-5, -1, 2]))
utest(True, eq, Histogram([-1, 2, 2]), Histogram([-1, 2, 2]))

b = Histogram([-1, 2, 2, 3])
b.remove(3)
utest_symmetric(utest, True, eq, Histogram([-1, 2, 2]), b)

b = Histogram([-1, 2, 2, -2])
b.remove(-2)
utest_symmetric(utest, True, eq, Histogram([-1, 2, 2]), b)

b = Histogram([-1, 2, 2])
b.add_sample(3)
utest_symmetric(utest, False, eq, Histogram([-1, 2, 2]), b)

utest(True, eq, Histogram(), Histogram())
utest_symmetric(utest, True, eq, Histogram(), Histogram.with_range(-3, 3))
utest_symmetric(utest_exc, InvalidState, eq, Histogram(), Histogram([1]))
utest(False, eq, Histogram([1]), [1])
utest_exc(TypeError, hash, Histogram([1]))


# Fingerprints ignore allocation.

a = Histogram([-1, 2, 2])
b = Histogram.with_range(-10, 10)
b.update([-1, 2, 2])
utest_val(a.fingerprint(), b.fingerprint(), 'padded fingerprint')
b.add_sample(3)
utest_val_ne(a.fingerprint(), b.fingerprint(), 'changed fingerprint')
utest_val(Histogram().fingerprint(), Histogram.with_range(0, 4).fingerprint(), 'empty fingerprint')


# Copies are independent.

a = Histogram([1, 2])
b = a.copy()
b.add_sample(0)
utest('Histogram(base=1, buckets=[1, 1])', repr, a)
utest('Histogram(base=0, buckets=[1, 1, 1])', repr, b)

utest_seq([(-1, 1), (0, 0), (1, 1)], Histogram([-1, 1]).items)
