## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import json
import shlex

from .types import ParseOutcome


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_item(it, width=None):
    if isinstance(it, str):
        text = '"' + it.replace('"', '\\"') + '"'
    elif isinstance(it, bool):
        text = str(it).lower()
    elif isinstance(it, dict):
        text = '{' + ' '.join(f"{k}:{format_item(v)}" for k, v in it.items()) + '}'
    elif isinstance(it, (list, tuple)):
        text = '[' + ' '.join(format_item(i) for i in it) + ']'
    else:
        text = repr(it)
    if width is not None and len(text) > width:
        text = text[:width-2] + ' …'
    return text


def show_step(step, raw, options, remaining, width=40, file=None):
    label = "∅" if raw is None else format_item(raw, width=width)
    print(f"\033[90m{step:>3} :\033[0m  {label:<{width}}"
          f" \033[36m =>\033[0m {format_item(options)} {format_item(remaining)}", file=file)


def _option_flag(name: str) -> str:
    return f"-{name}" if len(name) == 1 else f"--{name}"

def format_command_line(outcome: ParseOutcome) -> str:
    """Render options then `--` then remaining tokens, quoted for a POSIX shell like getopt(1)."""
    words = []
    for name, value in outcome.options.items():
        flag = _option_flag(name)
        if value is True:
            words.append(flag)
        elif isinstance(value, int):
            words.extend([flag] * value)
        else:
            words.extend([flag, shlex.quote(value)])
    words.append('--')
    words.extend(shlex.quote(str(token)) for token in outcome.remaining)
    return ' '.join(words)


def format_json(outcome: ParseOutcome, indent=None) -> str:
    payload = {'options': outcome.options, 'remaining': outcome.remaining}
    if outcome.error is not None:
        payload['error'] = outcome.message
    return json.dumps(payload, indent=indent, default=repr)


def format_error(outcome: ParseOutcome) -> str:
    return f"\033[30;43m PARSE ERROR. \033[0m {outcome.message}"
