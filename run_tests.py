#!/usr/bin/env python3
"""
Test runner for the seat sorting system
"""

import unittest
import sys
from pathlib import Path

# Add current directory to path for imports
sys.path.append(str(Path(__file__).parent))


def run_all_tests():
    """Run all test modules"""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    # Import test modules
    try:
        from tests import (
            test_classification, test_sorting, test_seating, test_dataset,
            test_pipeline, test_io, test_config_loader, test_cli
        )

        for module in (test_classification, test_sorting, test_seating, test_dataset,
                       test_pipeline, test_io, test_config_loader, test_cli):
            suite.addTests(loader.loadTestsFromModule(module))

        runner = unittest.TextTestRunner(verbosity=2)
        result = runner.run(suite)

        return result.wasSuccessful()

    except ImportError as e:
        print(f"Failed to import test modules: {e}")
        return False


def run_integration_test():
    """Run a basic integration test"""
    print("\n" + "=" * 50)
    print("INTEGRATION TEST")
    print("=" * 50)

    from seatsort.acquisition import generate_random
    from seatsort.dataset import Dataset
    from seatsort.errors import SeatSortError
    from seatsort.pipeline import SeatingPipeline
    from seatsort.rendering import render_ascii

    try:
        print("Generating random dataset...")
        dataset = Dataset.from_values(generate_random(60, -20, 99, seed=1))

        print("Running pipeline...")
        result = SeatingPipeline().run(dataset)
        print(render_ascii(result.seat_map))

        seat_map = result.seat_map
        placed = seat_map.placed_odd + seat_map.placed_even

        print(f"Values seated: {placed}/{len(dataset)}")
        print(f"Unplaced: {seat_map.unplaced}")

        success = (
            placed + seat_map.unplaced == len(dataset) and
            result.odd == sorted(result.odd) and
            result.even == sorted(result.even)
        )

        if success:
            print("Integration test PASSED")
        else:
            print("Integration test FAILED")

        return success

    except SeatSortError as e:
        print(f"Integration test FAILED: {e}")
        return False


if __name__ == "__main__":
    print("Running Seat Sorting System Tests")
    print("=" * 60)

    # Run unit tests
    print("Running unit tests...")
    unit_success = run_all_tests()

    # Run integration test
    integration_success = run_integration_test()

    # Summary
    print("\n" + "=" * 60)
    print("TEST SUMMARY")
    print("=" * 60)
    print(f"Unit tests: {'PASSED' if unit_success else 'FAILED'}")
    print(f"Integration test: {'PASSED' if integration_success else 'FAILED'}")

    overall_success = unit_success and integration_success
    print(f"Overall: {'PASSED' if overall_success else 'FAILED'}")

    sys.exit(0 if overall_success else 1)
