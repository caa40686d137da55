#!/usr/bin/env python3
"""
Validate three-layer architecture dependencies.

Rules:
- c1 imports nothing from c2 or c3
- c2 imports from c1 only
- c3 imports from c2 and c1 only

No circular dependencies allowed.
"""

import ast
import sys
from pathlib import Path
from typing import List, Tuple

PACKAGE = "tasktrack"


def extract_imports(file_path: Path) -> List[str]:
    """Extract all tasktrack imports from a Python file."""
    try:
        with open(file_path, 'r') as f:
            tree = ast.parse(f.read(), filename=str(file_path))
    except SyntaxError as e:
        print(f"⚠️  Syntax error in {file_path}: {e}")
        return []

    imports = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.name.startswith(f'{PACKAGE}.'):
                    imports.append(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module and node.module.startswith(f'{PACKAGE}.'):
                imports.append(node.module)

    return imports


def get_layer(package_name: str) -> str:
    """Get layer from package name (c1_, c2_, c3_) or 'core' for the rest."""
    for layer in ('c1', 'c2', 'c3'):
        if package_name.startswith(f'{layer}_'):
            return layer
    return 'core'


def validate_layer_dependencies(package_dir: Path = Path(PACKAGE)) -> Tuple[bool, List[str]]:
    """Validate that layer dependencies follow the rules."""
    violations = []

    if not package_dir.exists():
        return False, [f"Package directory not found: {package_dir}"]

    for py_file in package_dir.rglob("*.py"):
        package_parts = py_file.relative_to(package_dir).parts
        if len(package_parts) < 2:
            continue

        file_layer = get_layer(package_parts[0])

        for imported_module in extract_imports(py_file):
            parts = imported_module.split('.')
            imported_layer = get_layer(parts[1]) if len(parts) > 1 else 'core'

            if file_layer == 'c1' and imported_layer in ['c2', 'c3']:
                violations.append(f"{py_file}: c1 cannot import from {imported_layer} ({imported_module})")
            elif file_layer == 'c2' and imported_layer == 'c3':
                violations.append(f"{py_file}: c2 cannot import from c3 ({imported_module})")

    return len(violations) == 0, violations


def main():
    """Run architecture validation."""
    print("=" * 70)
    print("Three-Layer Architecture Validator")
    print("=" * 70)
    print()

    success, violations = validate_layer_dependencies()

    if success:
        print("✅ All layer dependencies are valid!")
        print()
        print("Layer rules:")
        print("  - c1 imports: stdlib + external packages + core")
        print("  - c2 imports: c1 + core + stdlib + external packages")
        print("  - c3 imports: c1 + c2 + core + stdlib + external packages")
        return 0
    else:
        print(f"❌ Found {len(violations)} layer dependency violations:")
        print()
        for violation in violations:
            print(f"  - {violation}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
