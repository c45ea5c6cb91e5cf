#!/usr/bin/env python3
"""
Example: Interval arithmetic and chord recognition.

This demonstrates how chords are interval sets: spelling a chord adds its
intervals to a root, and identifying a chord measures intervals back from
the presumed root and looks the set up in the catalog.

Usage:
    python examples/identify_chords.py
"""

from chuk_mcp_harmony import Chord, ChordQuality, Interval, PitchClass
from chuk_mcp_harmony.errors import HarmonyError


def main() -> None:
    """Demonstrate intervals and chords."""
    print("CHUK Harmony Demo")
    print("=" * 40)
    print()

    # Intervals
    print("Intervals:")
    for name in ["M3", "Perfect 5th", "A4", "d5"]:
        interval = Interval.from_string(name)
        print(f"  {name:12} {interval.semitones:2} semitones, inverse {interval.inverse}")
    print(f"  M3 + m3 = {Interval.M3 + Interval.m3}")
    print(f"  C -> A = {Interval.between(PitchClass.C, PitchClass.A)}")
    print()

    # Spelling chords from names
    print("Spelling chords:")
    for name in ["C", "Am", "G7", "Bb maj7", "E4 Major", "F#m7b5"]:
        try:
            chord = Chord.from_string(name)
        except HarmonyError as e:
            print(f"  {name:10} error: {e}")
            continue
        notes = " ".join(str(note) for note in chord.notes)
        print(f"  {name:10} {chord.full_name:22} {notes}")
    print()

    # Identifying chords from pitches
    print("Identifying chords:")
    for names in [["A", "C#", "E"], ["D", "F", "A", "C"], ["G", "B", "D", "F"], ["C", "D", "E"]]:
        pitches = [PitchClass.parse(name) for name in names]
        try:
            chord = Chord.from_pitches(pitches)
        except HarmonyError as e:
            print(f"  {' '.join(names):10} error: {e}")
            continue
        print(f"  {' '.join(names):10} {chord.name}")
    print()

    # Inversions
    print("Inversions of C Major:")
    chord = ChordQuality.MAJOR.at("C4")
    for letter in "abc":
        inverted = chord.invert(letter)
        notes = " ".join(str(note) for note in inverted.notes)
        print(f"  {letter}: {notes}")
    print()

    # The catalog
    print(f"Built-in chord qualities ({len(ChordQuality.all())}):")
    for quality in ChordQuality.all():
        abbrs = ", ".join(repr(abbr) for abbr in quality.abbrs)
        print(f"  {quality.name:14} {quality.canonical_key:12} {abbrs}")


if __name__ == "__main__":
    main()
