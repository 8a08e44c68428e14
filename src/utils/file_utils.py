import os
import re
import shutil
import stat
import threading

def _key_pattern(key: str) -> re.Pattern:
    return re.compile(f'^\\s*{re.escape(key)}\\s*=')

def _line_ending(line: str) -> str:
    return line[len(line.rstrip('\r\n')):]

def _split_lines(text: str) -> list[str]:
    # only \n ends a cfg line; form feeds and other separators stay inside it
    return [line for line in re.split('(?<=\n)', text) if line]

def set_config_line(text: str, key: str, value: str) -> str:
    """Sets ``key=value`` in cfg text, keeping every other line untouched.

    The first line defining ``key`` is rewritten in place, later duplicates
    are dropped. Without one, the line is appended.
    """
    pattern = _key_pattern(key)
    new_line = f'{key}={value}'
    newline = '\r\n' if '\r\n' in text else '\n'
    out = []
    replaced = False
    for line in _split_lines(text):
        if not pattern.match(line):
            out.append(line)
        elif not replaced:
            out.append(new_line + _line_ending(line))
            replaced = True
    if not replaced:
        if out and not _line_ending(out[-1]):
            out.append(newline)
        out.append(new_line + newline)
    return ''.join(out)

def remove_config_line(text: str, key: str) -> tuple[str, bool]:
    pattern = _key_pattern(key)
    lines = _split_lines(text)
    kept = [line for line in lines if not pattern.match(line)]
    return (''.join(kept), len(kept) != len(lines))

def has_config_line(text: str, key: str, value: str) -> bool:
    pattern = _key_pattern(key)
    return any((pattern.match(line) and line.split('=', 1)[1].strip() == value for line in _split_lines(text)))

def read_text_file(path: str) -> str:
    if not os.path.exists(path):
        return ''
    # newline='' and surrogateescape keep untouched lines byte-identical on rewrite
    with open(path, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
        return f.read()

def write_text_file(path: str, content: str):
    dir_path = os.path.dirname(path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)
    tmp = f'{path}.{os.getpid()}.{threading.get_ident()}.tmp'
    try:
        with open(tmp, 'w', encoding='utf-8', errors='surrogateescape', newline='') as f:
            f.write(content)
        os.replace(tmp, path)
    except OSError:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise

def ensure_writable(path: str) -> bool:
    try:
        mode = os.stat(path).st_mode
        os.chmod(path, mode | stat.S_IWUSR | stat.S_IWRITE)
        if os.path.isdir(path):
            for root, dirs, files in os.walk(path):
                for name in dirs + files:
                    full = os.path.join(root, name)
                    os.chmod(full, os.stat(full).st_mode | stat.S_IWUSR | stat.S_IWRITE)
        return True
    except (OSError, PermissionError):
        return False

def remove_tree(path: str) -> bool:
    """Deletes a directory tree. Returns False when there was nothing to delete."""
    if not os.path.exists(path):
        return False
    try:
        shutil.rmtree(path)
    except PermissionError:
        # read-only files left by the game or an archive tool
        if not ensure_writable(path):
            raise
        shutil.rmtree(path)
    return True
