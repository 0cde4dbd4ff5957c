import re

# Any link: #[ ... ] with no brackets or line breaks inside
ANY_LINK_PATTERN = re.compile(r"#\[[^\[\]\n]+\]")

# Location link: #[<file>:L<line>]
LOCATION_LINK_PATTERN = re.compile(r"#\[(?P<file>[^\[\]\n]+):L(?P<line>[0-9]+)\]")

# Metalink: #[:meta:root:<root>]
METALINK_PATTERN = re.compile(r"#\[:meta:root:(?P<root>[^\[\]\n]+)\]")
