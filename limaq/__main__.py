# coding: UTF-8

from .launcher import run_main

run_main()
