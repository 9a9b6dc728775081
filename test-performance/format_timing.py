# Times the format engine and the calendar kernel; run from the repository root

import time

import pyjalali

smallIterations = 100
largeIterations = smallIterations * 1000

PATTERN = ("A D E H HH K KK MM MMM MMI MM RD R S W Z a dd d e hh h kk k mm m"
           " ns nr rw rd ss s w y yyyy yyy yy z")
LAYOUT = "Monday 2 January 2006 15:04:05.999999999 -07:00 MST PM"


def gettime():
    return time.time()


def format_pattern(t, count):
    for _ in range(count):
        t.format(PATTERN)


def format_layout(t, count):
    for _ in range(count):
        t.time_format(LAYOUT)


def convert(count):
    for day in range(count):
        pyjalali.day2persian(day)


now = pyjalali.JalaliTime.now(pyjalali.iran())

# Begin SMALL_FORMAT_ITERATIONS test
start = gettime()
format_pattern(now, smallIterations)
smallFormatElapsed = gettime() - start
print("Elapse time of SMALL_FORMAT_ITERATIONS = %.4fs" % (smallFormatElapsed))

# Begin SMALL_LAYOUT_ITERATIONS test
start = gettime()
format_layout(now, smallIterations)
smallLayoutElapsed = gettime() - start
print("Elapse time of SMALL_LAYOUT_ITERATIONS = %.4fs" % (smallLayoutElapsed))

# Begin LARGE_FORMAT_ITERATIONS test
start = gettime()
format_pattern(now, largeIterations)
largeFormatElapsed = gettime() - start
print("Elapse time of LARGE_FORMAT_ITERATIONS = %.4fs" % (largeFormatElapsed))

# Begin LARGE_LAYOUT_ITERATIONS test
start = gettime()
format_layout(now, largeIterations)
largeLayoutElapsed = gettime() - start
print("Elapse time of LARGE_LAYOUT_ITERATIONS = %.4fs" % (largeLayoutElapsed))

# Begin CONVERSION_ITERATIONS test
start = gettime()
convert(largeIterations)
convertElapsed = gettime() - start
print("Elapse time of CONVERSION_ITERATIONS = %.4fs" % (convertElapsed))

if largeFormatElapsed > smallFormatElapsed * 1000:
    print("Format is too slow!")

if largeLayoutElapsed > smallLayoutElapsed * 1000:
    print("Layout format is too slow!")

print("\n")
