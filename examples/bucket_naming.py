#!/usr/bin/env python3
"""
Example: Generating bucket names with the in-memory provider.

This example walks through the three naming strategies without touching a real
cloud account:
- hash: deterministic, no I/O
- retry: live existence checks with clock-derived suffixes
- hybrid: hashed name first, retry only on collision

Swap the memory ProviderConfig for a LocalStack or AWS one to run the same code
against S3.

Usage:
    python examples/bucket_naming.py
"""

from lcp_lib.cal import CloudContainer
from lcp_lib.config import GeneratorConfig, ProviderConfig
from lcp_lib.exceptions import InvalidComponentsError
from lcp_lib.naming import NameRequest, generate_name


def main() -> None:
    """Demonstrate bucket naming strategies."""
    print("=" * 80)
    print("Bucket Naming Example")
    print("=" * 80)

    request = NameRequest(account="Prod_Account", team="Data.Eng", moniker="Analytics", region="us-west-2")

    # Step 1: Pure hash strategy
    print("\n📋 Step 1: Hash strategy (no I/O)")
    result = generate_name(request, GeneratorConfig(strategy="hash"))
    print(f"   ✓ {result.bucket_name}")
    print(f"   ✓ Sanitized: {result.sanitized.as_list()}")

    # Step 2: Hybrid and retry against the in-memory provider
    provider_config = ProviderConfig(name="memory", provider_family="memory", provider_implementation="memory")

    print("\n📋 Step 2: Hybrid strategy")
    with CloudContainer(provider_config) as container:
        first = container.generate(request)
        print(f"   ✓ {first.bucket_name} ({first.strategy_used.value})")

        second = container.name_generator().generate(request, use_cache=False)
        print(f"   ✓ {second.bucket_name} ({second.strategy_used.value}, hashed name was taken)")

        print(f"   ✓ Buckets: {container.object_storage().list_buckets()}")

    print("\n📋 Step 3: Retry strategy")
    with CloudContainer(provider_config, generator_config=GeneratorConfig(strategy="retry")) as container:
        for _ in range(2):
            result = container.name_generator().generate(request, use_cache=False)
            print(f"   ✓ {result.bucket_name} after {result.attempts} attempt(s)")

    # Step 4: Validation errors are reported before any I/O
    print("\n📋 Step 4: Invalid input")
    try:
        generate_name(NameRequest(account="a" * 25, team="data", moniker="cfg"), GeneratorConfig(strategy="hash"))
    except InvalidComponentsError as e:
        print(f"   ✗ {e}")

    print("\n" + "=" * 80)
    print(f"Response shape: {first.to_response()}")


if __name__ == "__main__":
    main()
