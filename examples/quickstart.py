"""Quickstart example for larakeys.

This example builds a throwaway Laravel-style workspace and resolves
translation keys against it.

Note: TranslationStore never raises on a lookup. Missing files, keys and
malformed sources all come back as None, so always check the result.
"""

import tempfile
from pathlib import Path

from larakeys import (
    LookupConfig,
    TranslationStore,
    extract_translation_key,
    format_hover,
    parse_php_array,
)

# Example 1: Parsing a translation file
print("=" * 50)
print("Example 1: Parsing a Translation File")
print("=" * 50)

tree = parse_php_array("""<?php

return [
    'failed' => 'These credentials do not match our records.',
    'throttle' => "Too many login attempts.",
];
""")
print(tree)
# Output: {'failed': 'These credentials do not match our records.', 'throttle': 'Too many login attempts.'}

with tempfile.TemporaryDirectory() as tmpdir:
    root = Path(tmpdir)
    (root / "lang" / "en").mkdir(parents=True)
    (root / "lang" / "es").mkdir(parents=True)
    (root / "lang" / "en" / "shopify.php").write_text(
        """<?php

return [
    'exceptions' => [
        'graphql' => 'GraphQL error occurred',
    ],
];
""",
        encoding="utf-8",
    )
    (root / "lang" / "es" / "shopify.php").write_text(
        "<?php return ['exceptions' => ['graphql' => 'Error de GraphQL']];",
        encoding="utf-8",
    )

    store = TranslationStore(root)

    # Example 2: Go to definition
    print("\n" + "=" * 50)
    print("Example 2: Resolving a Key")
    print("=" * 50)

    result = store.resolve("shopify.exceptions.graphql")
    if result is not None:
        print(result.value)
        print(f"{result.file_path.name}:{result.position.format(zero_based=False)}")
    # Output: GraphQL error occurred
    # Output: shopify.php:5:9

    print(store.resolve("shopify.exceptions"))
    # Output: None (mappings are not translations)

    # Example 3: Every locale at once
    print("\n" + "=" * 50)
    print("Example 3: All Locales")
    print("=" * 50)

    print(store.available_locales())
    # Output: ('en', 'es')

    key = extract_translation_key("{{ __('shopify.exceptions.graphql') }}")
    if key is not None:
        print(format_hover(key, store.resolve_all_locales(key)))

    # Example 4: Caching and invalidation
    print("\n" + "=" * 50)
    print("Example 4: Cache Invalidation")
    print("=" * 50)

    (root / "lang" / "en" / "shopify.php").write_text(
        "<?php return ['exceptions' => ['graphql' => 'Edited']];",
        encoding="utf-8",
    )
    stale = store.resolve("shopify.exceptions.graphql")
    print(stale.value if stale else None)
    # Output: GraphQL error occurred (cached until invalidated)

    store.invalidate()
    fresh = store.resolve("shopify.exceptions.graphql")
    print(fresh.value if fresh else None)
    # Output: Edited

    print(store.get_cache_stats())

# Example 5: Custom directory layout
print("\n" + "=" * 50)
print("Example 5: Custom Language Paths")
print("=" * 50)

config = LookupConfig(lang_paths=("modules/core/lang/{locale}", "lang/{locale}"))
print(config.lang_roots)
# Output: ('modules/core/lang', 'lang')

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
