"""Default suggestion policy and CLI settings."""

# Candidates farther than this many edits from the query are dropped
MAX_DISTANCE = 2

# Upper bound on the number of suggestions returned per query
MAX_SUGGESTIONS = 10

# Typing this at the interactive prompt ends the session
EXIT_COMMAND = "exit"

DEFAULT_WORDS_FILE = "words.txt"

# Longest word the web service will compare; distance cost grows with the
# product of both lengths
MAX_WORD_LENGTH = 100

# Upper bound on a web request body, in bytes
MAX_REQUEST_BYTES = 16 * 1024
