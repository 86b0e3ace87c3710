# The fixed rule set (RFC 5321 practical caps). Changing any of these changes which
# stored addresses are accepted.
MAX_TOTAL_LENGTH = 320  # local part + '@' + domain
MAX_LOCAL_LENGTH = 64
MAX_DOMAIN_LENGTH = 255
MAX_LABEL_LENGTH = 63
MIN_TLD_LENGTH = 2
# Non-alphanumeric characters allowed before the '@'. Letters and digits are ASCII only.
LOCAL_PUNCTUATION = "._%+-"
