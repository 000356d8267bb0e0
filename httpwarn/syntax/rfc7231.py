"""
Regex for RFC7231 dates

These regex are derived from the date rules of the collected ABNF in RFC7231.

  <http://httpwg.org/specs/rfc7231.html#collected.abnf>

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name,line-too-long

from .rfc5234 import DIGIT, SP

SPEC_URL = "http://httpwg.org/specs/rfc7231"


# second = 2DIGIT

second = rf"(?: {DIGIT} {DIGIT} )"

# minute = 2DIGIT

minute = rf"(?: {DIGIT} {DIGIT} )"

# hour = 2DIGIT

hour = rf"(?: {DIGIT} {DIGIT} )"

# time-of-day = hour ":" minute ":" second

time_of_day = rf"(?: {hour} : {minute} : {second} )"

# day = 2DIGIT

day = rf"(?: {DIGIT} {DIGIT} )"

# day-name = %x4D.6F.6E ; Mon
#  / %x54.75.65 ; Tue
#  / %x57.65.64 ; Wed
#  / %x54.68.75 ; Thu
#  / %x46.72.69 ; Fri
#  / %x53.61.74 ; Sat
#  / %x53.75.6E ; Sun

day_name = r"(?: Mon | Tue | Wed | Thu | Fri | Sat | Sun )"

# day-name-l = %x4D.6F.6E.64.61.79 ; Monday
#  / %x54.75.65.73.64.61.79 ; Tuesday
#  / %x57.65.64.6E.65.73.64.61.79 ; Wednesday
#  / %x54.68.75.72.73.64.61.79 ; Thursday
#  / %x46.72.69.64.61.79 ; Friday
#  / %x53.61.74.75.72.64.61.79 ; Saturday
#  / %x53.75.6E.64.61.79 ; Sunday

day_name_l = (
    r"(?: Monday | Tuesday | Wednesday | Thursday | Friday | Saturday | Sunday )"
)

# month = "Jan" / "Feb" / "Mar" / "Apr" / "May" / "Jun"
#  / "Jul" / "Aug" / "Sep" / "Oct" / "Nov" / "Dec"

month = r"(?: Jan | Feb | Mar | Apr | May | Jun | Jul | Aug | Sep | Oct | Nov | Dec )"

# year = 4DIGIT

year = rf"(?: {DIGIT}{{4}} )"

# GMT = %x47.4D.54 ; GMT

GMT = r"(?: GMT )"

# date1 = day SP month SP year

date1 = rf"(?: {day} {SP} {month} {SP} {year} )"

# date2 = day "-" month "-" 2DIGIT

date2 = rf"(?: {day} \- {month} \- {DIGIT}{{2}} )"

# date3 = month SP ( 2DIGIT / ( SP DIGIT ) )

date3 = rf"(?: {month} {SP} (?: {DIGIT}{{2}} | (?: {SP} {DIGIT} ) ) )"

# IMF-fixdate = day-name "," SP date1 SP time-of-day SP GMT

IMF_fixdate = rf"(?: {day_name} , {SP} {date1} {SP} {time_of_day} {SP} {GMT} )"

# asctime-date = day-name SP date3 SP time-of-day SP year

asctime_date = rf"(?: {day_name} {SP} {date3} {SP} {time_of_day} {SP} {year} )"

# rfc850-date = day-name-l "," SP date2 SP time-of-day SP GMT

rfc850_date = rf"(?: {day_name_l} \, {SP} {date2} {SP} {time_of_day} {SP} {GMT} )"

# obs-date = rfc850-date / asctime-date

obs_date = rf"(?: {rfc850_date} | {asctime_date} )"

# HTTP-date = IMF-fixdate / obs-date

HTTP_date = rf"(?: {IMF_fixdate} | {obs_date} )"
