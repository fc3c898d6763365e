import argparse
import json
from typing import List, Optional

from endpoints import LOGIN_ROUTE
from . import settings
from .api import HttpFileApi
from .client import FileManageClient
from .controller import FileManageController
from .i18n import Localizer
from .models import RemoteObject, SortKey
from .session_store import CookieCredentialStore, load_cookies_from_json, save_session
from .sinks import LogNotifier, RouteNavigator
from .utils import format_bytes, format_date

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_LOGIN_REQUIRED = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='filemanage')
    sub = p.add_subparsers(dest='cmd', required=True)

    auth = sub.add_parser('auth')
    auth_sub = auth.add_subparsers(dest='auth_cmd', required=True)
    auth_import = auth_sub.add_parser('import')
    auth_import.add_argument('--password')
    auth_import.add_argument('--cookies')
    auth_import.add_argument('--out', default=settings.session_path())
    auth_logout = auth_sub.add_parser('logout')
    auth_logout.add_argument('--session', default=settings.session_path())

    ls = sub.add_parser('ls')
    ls.add_argument('--sort', choices=[k.value for k in SortKey], default=SortKey.NAME.value)
    ls.add_argument('--desc', action='store_true')
    ls.add_argument('--json', action='store_true')
    _add_remote_args(ls)

    rm = sub.add_parser('rm')
    rm.add_argument('key')
    _add_remote_args(rm)

    return p


def _add_remote_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--session', default=settings.session_path())
    parser.add_argument('--base-url', default=None)
    parser.add_argument('--lang', default=None)


def _apply_sort(controller: FileManageController, key: str, desc: bool) -> None:
    if controller.sort_spec.key.value != key:
        controller.set_sort(key)
    if desc:
        controller.set_sort(key)


def _as_dict(item: RemoteObject) -> dict:
    return {
        'key': item.key,
        'last_modified': item.last_modified.isoformat() if item.last_modified else None,
        'size': item.size,
    }


def _print_listing(items: List[RemoteObject], as_json: bool) -> None:
    if as_json:
        print(json.dumps([_as_dict(item) for item in items], indent=2))
        return
    for item in items:
        print(f"{item.key or ''}\t{format_bytes(item.size)}\t{format_date(item.last_modified)}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cmd == 'auth' and args.auth_cmd == 'import':
        if args.cookies:
            save_session(args.out, load_cookies_from_json(args.cookies))
            print(f'OK: session saved to {args.out}')
            return EXIT_OK
        if not args.password:
            raise SystemExit('Missing --password (or use --cookies <path>)')
        CookieCredentialStore.open(args.out).set_credential(args.password)
        print(f'OK: session saved to {args.out}')
        return EXIT_OK

    if args.cmd == 'auth' and args.auth_cmd == 'logout':
        CookieCredentialStore.open(args.session).remove_credential()
        print('OK')
        return EXIT_OK

    store = CookieCredentialStore.open(args.session)
    navigator = RouteNavigator()
    with FileManageClient(base_url=args.base_url, cookies=store.cookies) as client:
        # removals must hit the jar the client actually sends
        store.cookies = client.cookies
        api = HttpFileApi(client)
        controller = FileManageController(
            list_files=api.list_files,
            delete_file=api.delete_file,
            notifier=LogNotifier(),
            credentials=store,
            navigator=navigator,
            localizer=Localizer(args.lang),
        )

        if args.cmd == 'ls':
            _apply_sort(controller, args.sort, args.desc)
            ok = controller.mount()
            if ok:
                _print_listing(controller.sorted_files, args.json)
        elif args.cmd == 'rm':
            ok = controller.delete_entry(args.key)
            if ok:
                print(f'OK: {len(controller.files)} file(s) remaining')
        else:
            return EXIT_FAILED

    if navigator.current == LOGIN_ROUTE:
        return EXIT_LOGIN_REQUIRED
    return EXIT_OK if ok else EXIT_FAILED
