"""Masthead art for the spooled text layout, sized for an 80 mm roll at 5 CPI."""

MASTHEAD_LINES = (
    "        11111111100          000",
    "      111111111111111111      00000",
    "    1111111111111111111111111100000",
    "    1111       1111111111111111100",
    "      11       0     1111111100",
    "      1      00             1",
    "            00      00       1",
    "          000    00000       1",
    "        0000  00000000       1",
    "      000 00    000000      000",
    "      0000      000000     00000",
    "    10000      000000      000",
    "    00000      000000       1",
    "    000000     10000        1     0",
    "    1000000 00              1    00",
    "      1111111                1 0000",
    "      1111111100           000000",
    "        111111111111111110000000",
    "          111111111111100000",
    "                00000000",
)

MASTHEAD = "\n" + "\n".join(MASTHEAD_LINES) + "\n"

TITLE = "The New York Times"
