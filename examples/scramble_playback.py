#!/usr/bin/env python3
# ========================================
# Copyright 2021 22nd Solutions, LLC
# Copyright 2024 Martin TOUZOT
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR
# OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE
# USE OR OTHER DEALINGS IN THE SOFTWARE.
#
# ========================================
"""Scramble playback.

The script scrambles a cube, then walks back to the solved cube one move at
a time by playing the inverse of the scramble. Press enter to play the next
move, "b" to undo it, or "q" to quit.

Usage:
    python3 scramble_playback.py
"""
import time
import rubikscube

# Scramble a solved cube
scramble = rubikscube.generate_scramble(20)
cube = rubikscube.solved_cube().apply_moves(scramble)
print("Scramble: {}".format(scramble))
print(cube)

# ----------------------------------------------------
# Replay the inverse moves, and catch keyboard exceptions
# ---------------------------------------------------
playback = rubikscube.Playback(cube, scramble.inverse())
start_time = time.time()
try:
    while not playback.at_end:
        print("Next move: {}".format(playback.next_move))
        response = input("[enter] play, [b] back, [q] quit: ").strip()

        if response == "q":
            break
        elif response == "b":
            if playback.at_start:
                print("Nothing to undo")
                continue
            playback.step_backward()
        else:
            playback.step_forward()
        print(playback.state)

    if playback.state.is_solved():
        elapsed = rubikscube.format_time((time.time() - start_time) * 1000)
        print("Solved in {}".format(elapsed))

except KeyboardInterrupt:
    print("\nStopping the playback")
