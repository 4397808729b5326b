#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Dec 21 21:19:41 2023

@author: Marcel Hesselberth
"""

# Monday based, like datetime.date.weekday()
wdays   = { 0:"Monday", 1:"Tuesday", 2:"Wednesday", 3:"Thursday",
            4:"Friday", 5:"Saturday", 6:"Sunday" }

months  = {1: "January", 2: "February", 3:"March", 4: "April", 5: "May",
           6: "June", 7: "July", 8: "August", 9: "September", 10: "October",
           11: "November", 12: "December"}

hebrew_months = {1: "Nisan", 2: "Iyyar", 3: "Sivan", 4: "Tammuz", 5: "Av",
                 6: "Elul", 7: "Tishrei", 8: "Cheshvan", 9: "Kislev",
                 10: "Tevet", 11: "Shevat", 12: "Adar", 13: "Adar II"}

islamic_months = {1: "Muharram", 2: "Safar", 3: "Rabi'al-Awwal",
                  4: "Rabi'ath-Thani", 5: "Jumada I-Ula", 6: "Jumada t-Tania",
                  7: "Rajab", 8: "Sha'ban", 9: "Ramadan", 10: "Shawwal",
                  11: "Dhu I-Qa'da", 12: "Dhu I-Hijja"}

vulcan_months = {1: "Z'at", 2: "D'ruh", 3: "K'riBrax", 4: "re'T'Khutai",
                 5: "T'keKhuti", 6: "Khuti", 7: "Ta'Krat", 8: "K'ri'lior",
                 9: "et'Khior", 10: "T'lakht", 11: "T'ke'Tas", 12: "Tasmeen"}

SPD     = 86400                # seconds per day
PRECISION = 3                  # decimals of a second kept by the codec (ms)

# JD of day 1 of each calendar (midnight)
GREGORIAN_EPOCH = 1721425.5
JULIAN_EPOCH    = 1721423.5
HEBREW_EPOCH    = 347995.5
ISLAMIC_EPOCH   = 1948439.5
VULCAN_EPOCH    = 1723762.5

EARTH_ORBITAL_PERIOD_DAYS = 365.2425

# Years outside this range could overflow the int64 kernels
MINYEAR = -999999
MAXYEAR = 999999
