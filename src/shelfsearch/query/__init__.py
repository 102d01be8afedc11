"""Engine-native query construction."""
