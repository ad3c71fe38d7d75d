"""
Fixed coefficient tables for the double-precision E1(x) approximations.

All polynomials are stored in ascending order of power and evaluated with
`evalpoly`. The tables were derived offline and are plain constants here.

Taylor tables: E1(x) = T(x) - log(x) near the origin, with
T = [-γ, 1, -1/4, 1/18, ...] and c[k] = -c[k-1] * (k - 1) / k**2.

Rational tables: E1(x) = exp(-x) * N(x) / D(x), obtained by truncating
the continued fraction

    E1(x) = exp(-x) / (x + 1/(1 + 1/(x + 2/(1 + 2/(x + ...)))))

at the given depth, seeded with a fitted cubic tail for the intervals
near the crossover (x < 25) and with the plain tail x beyond.
"""

TAYLOR_ORDER_4 = (
    -0.57721566490153287, 1.0, -0.25, 0.055555555555555552,
    -0.010416666666666666,
)

TAYLOR_ORDER_8 = (
    -0.57721566490153287, 1.0, -0.25, 0.055555555555555552,
    -0.010416666666666666, 0.0016666666666666666, -0.00023148148148148149,
    2.834467120181406e-05, -3.1001984126984127e-06,
)

TAYLOR_ORDER_15 = (
    -0.57721566490153287, 1.0, -0.25, 0.055555555555555552,
    -0.010416666666666666, 0.0016666666666666666, -0.00023148148148148149,
    2.834467120181406e-05, -3.1001984126984127e-06, 3.0619243582206544e-07,
    -2.7557319223985888e-08, 2.2774643986765196e-09, -1.7397297489890078e-10,
    1.235311064370893e-11, -8.1933897126640856e-13, 5.0981091545465421e-14,
)

TAYLOR_ORDER_37 = (
    -0.57721566490153287, 1.0, -0.25, 0.055555555555555552,
    -0.010416666666666666, 0.0016666666666666666, -0.00023148148148148149,
    2.834467120181406e-05, -3.1001984126984127e-06, 3.0619243582206544e-07,
    -2.7557319223985888e-08, 2.2774643986765196e-09, -1.7397297489890078e-10,
    1.235311064370893e-11, -8.1933897126640856e-13, 5.0981091545465421e-14,
    -2.9871733327421146e-15, 1.6537983849091293e-16, -8.6773372047701222e-18,
    4.3266501298022771e-19, -2.0551588116560816e-20, 9.3204481254244065e-22,
    -4.0439960874775317e-23, 1.6818131176655143e-24, -6.715573212900491e-26,
    2.5787801137537886e-27, -9.5369087047107562e-29, 3.4013666162205716e-30,
    -1.1713890132392274e-31, 3.8999872022233499e-33, -1.2566625429386349e-34,
    3.9229840050113474e-36, -1.1876221108921071e-37, 3.4897986729611965e-39,
    -9.962228045650474e-41, 2.7650265596091113e-42, -7.467278517462877e-44,
    1.9636378862575864e-45,
)

CF_X_LT_3_NUM = (
    4.6528930142517114e+17, 5.6266853055680532e+18, 1.761738521597083e+19,
    2.3022308251656466e+19, 1.5396661942743597e+19, 5.965438892517589e+18,
    1.5178614880549207e+18, 3.0381368466602349e+17, 54180784687029144.0,
    7197694868440981.0, 291916690266934.5, -109348881936874.27,
    -26821594162739.402, -3222014272757.9048, -247949818909.07251,
    -13106179736.118, -486435888.24655789, -12656338.442458317,
    -225788.51163704912, -2626.1231293873652, -17.900774616742513,
    -0.054130491914733292,
)

CF_X_LT_3_DEN = (
    1.21645100408832e+17, 2.9520158453109299e+18, 1.5890261872000946e+19,
    3.3557859051480048e+19, 3.4966272858052092e+19, 2.0371891911169606e+19,
    7.2785912579709809e+18, 1.7834659558958226e+18, 3.5209825283469683e+17,
    60958815697793376.0, 7547455982666711.0, 202202689052737.28,
    -133551339954155.06, -29829456547030.316, -3458167567666.5625,
    -260604774910.69293, -13580603757.85717, -498874087.67996222,
    -12879553.829593433, -228396.89638329548, -2643.9697735121931,
    -17.954905108657247, -0.054130491914733292,
)

CF_X_LT_4_NUM = (
    1309488071671475.8, 13471216101658748.0, 36435385309764976.0,
    41581566571666544.0, 24424825469345968.0, 8255601560765239.0,
    1760116978089699.5, 269735824721565.06, 35206073953717.68,
    3895142956547.9849, 241654962571.82101, -12033436012.811762,
    -4304927925.8504124, -453570042.38625604, -27631228.078631207,
    -1075791.1220321916, -27140.154375985836, -429.19989966067345,
    -3.8625083793984234, -0.015067049382830766,
)

CF_X_LT_4_DEN = (
    355687428096000.0, 7510088456200690.0, 35439068891320156.0,
    66018622940644512.0, 60943048941195128.0, 31449223698077584.0,
    9816797715991722.0, 2003331693443879.2, 301761332425597.81,
    38856934689714.203, 4140265025860.2603, 232859709565.65582,
    -15955444261.45306, -4733770036.0298786, -480201587.49947262,
    -28681117.503137968, -1102513.468162013, -27565.536968415261,
    -433.04734099068907, -3.8775754287812543, -0.015067049382830766,
)

CF_X_LT_6_1_NUM = (
    4617696637768.3633, 39818625484514.602, 91103078414808.312,
    88320709971746.656, 44026429398872.578, 12502626412883.35,
    2173393273278.5315, 254441313401.61502, 23842473801.099495,
    1996502425.2406483, 111068434.46617807, -1135514.0679464857,
    -778185.76666066214, -63987.418647144405, -2695.738721098759,
    -64.225815301954782, -0.81952893175428476, -0.0043497352906597302,
)

CF_X_LT_6_1_DEN = (
    1307674368000.0, 23793120062525.453, 96949094636523.062,
    155999940927888.12, 124148624533801.73, 54906689778831.211,
    14474160111801.975, 2408658338990.7563, 276601863378.9101,
    25731118560.663364, 2107039165.199481, 110549991.28873865,
    -1857020.87785056, -839659.77898770652, -66621.333593177696,
    -2759.1580566748316, -65.040994498418414, -0.8238786670449445,
    -0.0043497352906597302,
)

CF_X_LT_8_15_NUM = (
    11367536.8478554, 58469494.659201711, 77530713.760929883,
    41376640.107139803, 10460011.103381936, 1329627.2843163921,
    89773.872091231082, 4742.583967577013, 319.57433491715653,
    7.8999793729469419, -0.89148068349348686, -0.060128025142594306,
    -0.0010060498260648586,
)

CF_X_LT_8_15_DEN = (
    3628800.0, 43676968.47855401, 113672048.49848218, 111498141.91732308,
    50732141.212230593, 11710731.679991398, 1415475.5517502616,
    94228.365610079883, 5052.2941158599451, 328.19848954590805,
    7.0656085651178548, -0.95060265881001627, -0.061134074968659163,
    -0.0010060498260648586,
)

CF_X_LT_25_NUM = (
    1088596.4873032155, 4747421.9234179128, 5370487.8526638765,
    2440507.5844215169, 518739.22122067469, 53379.04214380934,
    2576.2104801712599, 76.320764591471502, 4.2476749962153653,
    0.094773327887108988, -0.0075663834228612845, -0.0002634921890930066,
)

CF_X_LT_25_DEN = (
    362880.0, 3824104.3857289408, 8697981.1614459511, 7422837.9908753643,
    2912843.7038743808, 569725.10415459855, 55890.027087791394,
    2648.647544789249, 80.454392507989382, 4.3492242309580567,
    0.087470436653340713, -0.0078298756119542911, -0.0002634921890930066,
)

CF_X_LT_200_NUM = (
    986256.0, 3110544.0, 3258936.0, 2055240.0, 837330.0, 200634.0, 26913.0,
    1955.0, 71.0, 1.0,
)

CF_X_LT_200_DEN = (
    362880.0, 2903040.0, 5443200.0, 4838400.0, 2751840.0, 1016064.0, 225792.0,
    28800.0, 2025.0, 72.0, 1.0,
)

CF_X_LT_740_NUM = (
    250.0, 314.0, 229.0, 107.0, 19.0, 1.0,
)

CF_X_LT_740_DEN = (
    120.0, 480.0, 480.0, 320.0, 125.0, 20.0, 1.0,
)
