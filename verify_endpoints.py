#!/usr/bin/env python3
"""
Verify that the required status service endpoints are implemented.
"""

import sys
from pathlib import Path

ROUTES_DIR = Path('src/status_service/api/routes')
HTTP_METHODS = ['get', 'post', 'put', 'delete', 'patch']


def find_router_prefix(content):
    """Return the prefix passed to APIRouter(...), or an empty string."""
    for line in content.split('\n'):
        if 'APIRouter(' in line and 'prefix=' in line:
            start = line.find('prefix=') + len('prefix=') + 1
            quote = line[start - 1]
            end = line.find(quote, start)
            return line[start:end] if end > 0 else ""
    return ""


def find_endpoints_in_file(file_path):
    """Extract endpoint definitions from a Python file."""
    with open(file_path, 'r') as f:
        content = f.read()

    prefix = find_router_prefix(content)
    endpoints = []

    for i, line in enumerate(content.split('\n'), 1):
        # Look for @router.get, @router.post, etc.
        for method in HTTP_METHODS:
            if f'@router.{method}(' not in line:
                continue
            path = ""
            for quote in ('"', "'"):
                if f'({quote}' in line:
                    start = line.find(f'({quote}') + 2
                    end = line.find(quote, start)
                    path = line[start:end] if end >= start else ""
                    break
            endpoints.append({
                'method': method.upper(),
                'path': prefix + path,
                'file': file_path.name,
                'line': i
            })
            break

    return endpoints


def main():
    """Main verification function."""
    print("=" * 80)
    print("Status Service - Endpoint Verification")
    print("=" * 80)

    required_endpoints = [
        ('GET', '/api/status', 'Service status'),
    ]

    if not ROUTES_DIR.exists():
        print(f"\n❌ ERROR: {ROUTES_DIR} not found!")
        return 1

    endpoints = []
    for route_file in sorted(ROUTES_DIR.glob('*.py')):
        endpoints.extend(find_endpoints_in_file(route_file))

    print(f"\nFound {len(endpoints)} endpoint(s) in {ROUTES_DIR}:")
    for ep in endpoints:
        print(f"  {ep['method']:6s} {ep['path']:30s} ({ep['file']}:{ep['line']})")

    print("\n" + "=" * 80)
    print("Checking Required Endpoints:")
    print("=" * 80)

    missing = 0
    for method, path, description in required_endpoints:
        if any(ep['method'] == method and ep['path'] == path for ep in endpoints):
            print(f"✓ {method:6s} {path:30s} - {description}")
        else:
            missing += 1
            print(f"✗ {method:6s} {path:30s} - {description} [MISSING]")

    if missing == 0:
        print("\n✓ SUCCESS: All required endpoints are implemented!")
        return 0
    print(f"\n✗ INCOMPLETE: {missing} endpoint(s) missing.")
    return 1


if __name__ == '__main__':
    sys.exit(main())
