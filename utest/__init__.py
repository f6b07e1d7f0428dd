'''
utest is a tiny unit testing library.

Test scripts call the `utest_*` functions at module level.
Each failure is reported to stderr with the calling file and line;
if any test failed, the process exits with status 1.
'''


import atexit as _atexit
import inspect as _inspect
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import print_exception as _print_exception
from typing import Any, Callable


__all__ = [
  'utest',
  'utest_exc',
  'utest_seq',
  'utest_symmetric',
  'utest_val',
  'utest_val_ne',
]


_utest_test_count = 0
_utest_failure_count = 0


def utest(exp:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  _count_test()
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    _utest_failure(_utest_depth, exp_label='value', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
    return
  if exp != ret:
    _utest_failure(_utest_depth, exp_label='value', exp=exp, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is not raised or if the raised exception does not match `exp_exc`;
  see `_compare_exceptions` for the matching rules.
  '''
  _count_test()
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    if not _compare_exceptions(exp_exc, exc):
      _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)
    return
  _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_seq(exp_seq:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`, and exhaust the returned iterable into a list.
  Log a test failure if an exception is raised, or if the list does not equal `exp_seq`.
  '''
  _count_test()
  exp = list(exp_seq) # Copy for isolation and a consistent repr.
  try: ret = list(fn(*args, **kwargs))
  except Exception as exc:
    _utest_failure(_utest_depth, exp_label='sequence', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
    return
  if exp != ret:
    _utest_failure(_utest_depth, exp_label='sequence', exp=exp, ret_label='sequence', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  'Log a test failure if `exp_val` does not equal `act_val`, described by `desc`.'
  _count_test()
  if exp_val != act_val:
    _utest_failure(0, exp_label='value', exp=exp_val, ret_label='value', ret=act_val, subj=desc)


def utest_val_ne(exp_val:Any, act_val:Any, desc='<value>') -> None:
  'Log a test failure if `exp_val` equals `act_val`, described by `desc`.'
  _count_test()
  if exp_val == act_val:
    _utest_failure(0, exp_label='inequality with', exp=exp_val, ret_label='value', ret=act_val, subj=desc)


def utest_symmetric(test_fn:Callable, exp:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Apply `test_fn` to the provided arguments,
  then again with the last two positional arguments swapped.
  '''
  *head, a, b = args
  test_fn(exp, fn, *head, a, b, _utest_depth=_utest_depth+1, **kwargs)
  test_fn(exp, fn, *head, b, a, _utest_depth=_utest_depth+1, **kwargs)


def _count_test() -> None:
  global _utest_test_count
  _utest_test_count += 1


def _utest_failure(depth:int, exp_label:str, exp:Any, ret_label:str|None=None, ret:Any=None, exc:BaseException|None=None,
 subj:Any=None, args:tuple[Any,...]=(), kwargs:dict[str,Any]={}) -> None:

  global _utest_failure_count
  _utest_failure_count += 1

  info = _inspect.getframeinfo(_inspect.stack()[2 + depth][0]) # Caller of the utest function.
  name = getattr(subj, '__qualname__', None) or str(subj)
  path = _rel_path(info.filename)
  if '/' not in path: path = f'./{path}'
  _errL(f'\n{path}:{info.lineno}: utest failure: {name}')

  for i, el in enumerate(args):
    _errL(f'  arg {i} = {el!r}')
  for key, val in kwargs.items():
    _errL(f'  arg {key} = {val!r}')

  _errL(f'  expected {exp_label}: {exp!r}')
  if exc is None:
    _errL(f'  returned {ret_label}: {ret!r}')
  else:
    _errL(f'  raised exception: {exc!r}')
    _print_exception(exc, file=_stderr)


def _compare_exceptions(exp:Any, act:BaseException) -> bool:
  '''
  Compare two exceptions for approximate value equality.
  Since Python exceptions do not implement value equality, we offer several methods of comparison:
  * if `exp` is a string, then compare it to the repr of `act`.
  * if `exp` is a type, then test if `act` is an instance of `exp`.
  * otherwise, compare the types and args of `act` to `exp`.
  '''
  if isinstance(exp, str): return exp == repr(act)
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _errL(*items:Any) -> None: print(*items, sep='', file=_stderr)


@_atexit.register
def report() -> None:
  'At process exit, if any test failures occured, print a summary message and force process to exit with status code 1.'
  from os import _exit
  if _utest_failure_count > 0:
    _errL(f'\nutest ran: {_utest_test_count}; failed: {_utest_failure_count}')
    _stderr.flush()
    _exit(1) # Raising SystemExit has no effect in an atexit handler.
