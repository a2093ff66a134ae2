import time
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'
SUMMARY_MARK = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """terminal color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CheckFailed(AssertionError):
    """an assertion failure, as opposed to an error raised by the code under test."""
    __test__ = False


# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case. the function stays callable so pytest can collect it too."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# the decorator itself is not a test
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise CheckFailed(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """call func and require it to raise error_type. returns the caught error for further checks."""
    try:
        func()
    except error_type as e:
        return e
    raise CheckFailed(message or f"expected {error_type.__name__} to be raised")


def describe(value: Any) -> str:
    """short printable form of a test argument, functions by name."""
    if value is None: return "None"
    if callable(value) and hasattr(value, '__name__'): return value.__name__
    if isinstance(value, (list, tuple)): return f"[{', '.join(describe(v) for v in value)}]"
    if isinstance(value, dict): return f"{{{', '.join(f'{k}: {describe(v)}' for k, v in value.items())}}}"
    return repr(value)


def comprehension_case(expected: Any, func: Callable, *args: Any) -> None:
    """assert func(*args) == expected, naming the call in the failure message."""
    result = func(*args)
    call = f"{func.__name__}({', '.join(describe(a) for a in args)})"
    assert_that(result == expected, f"{call} => expected {describe(expected)}, got {describe(result)}")


def run(title: str = "test run") -> None:
    """execute every registered test and print a report."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        func = test_item['func']
        description = test_item['description']

        passed = False
        error = None

        try:
            func()
            passed = True
        except CheckFailed as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    _print_summary(start_time)

    # cleared so several suites can run from one script
    _suite_state['tests'] = []


def _print_summary(start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_MARK}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
